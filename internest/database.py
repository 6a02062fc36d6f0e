# database.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker


logger = logging.getLogger(__name__)

Base = declarative_base()


def _build_connect_args(db_url: str) -> dict:
    if db_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def mask_db_url(db_url: str) -> str:
    try:
        return str(make_url(db_url).set(password="***"))
    except Exception:
        return db_url


def build_engine(db_url: str) -> Engine:
    engine = create_engine(db_url, pool_pre_ping=True, future=True, connect_args=_build_connect_args(db_url))
    logger.info("SQLAlchemy ORM db_url=%s", mask_db_url(db_url))
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


def init_schema(engine: Engine) -> None:
    # Registers the mapped tables on Base.metadata before creating them.
    import internest.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
