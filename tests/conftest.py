from __future__ import annotations

import os
from datetime import datetime
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["DB_USE_MYSQL"] = "false"

    # Ensure a local .env cannot leak development-only behavior into tests.
    os.environ["ENVIRONMENT"] = "test"


@pytest.fixture()
def client() -> Any:
    from internest.database import Base
    from internest.main import create_app

    app = create_app()
    with TestClient(app) as c:
        engine = app.state.engine
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
        yield c


@pytest.fixture()
def insert_preference(client) -> Callable[..., int]:
    """Insert a preference row directly, optionally backdated."""
    from internest.models.preference import Preference

    def _insert(*, created_at: datetime | None = None, **fields: Any) -> int:
        factory = client.app.state.session_factory
        with factory() as db:
            row = Preference(session_id=fields.pop("session_id", "session_test"), **fields)
            if created_at is not None:
                row.created_at = created_at
                row.updated_at = created_at
            db.add(row)
            db.commit()
            db.refresh(row)
            return int(row.id)

    return _insert
