from __future__ import annotations

import json
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterator, Mapping

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from internest.errors import StorageError
from internest.models.preference import Preference
from internest.models.search_log import ANONYMOUS_SESSION, SearchLog


# Columns a client may set on a preference; everything else is store-managed.
PREFERENCE_FIELDS = ("education_level", "skills", "sector", "location")
GROUPABLE_COLUMNS = {
    "education_level": Preference.education_level,
    "sector": Preference.sector,
    "location": Preference.location,
}


@dataclass(frozen=True)
class WriteResult:
    id: int | None
    rows_affected: int


@dataclass(frozen=True)
class PreferenceRecord:
    id: int
    session_id: str | None
    user_ip: str | None
    education_level: str | None
    skills: str | None
    sector: str | None
    location: str | None
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_row(cls, row: Preference) -> "PreferenceRecord":
        return cls(
            id=int(row.id),
            session_id=row.session_id,
            user_ip=row.user_ip,
            education_level=row.education_level,
            skills=row.skills,
            sector=row.sector,
            location=row.location,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in PREFERENCE_FIELDS}


@dataclass(frozen=True)
class SearchLogEntry:
    session_id: str
    user_ip: str | None
    search_params: dict[str, Any]
    results_count: int


class _SessionStore:
    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        session: Session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as exc:
            session.rollback()
            raise StorageError(f"{operation} failed: {type(exc).__name__}: {exc}") from exc
        finally:
            session.close()


class PreferenceStore(_SessionStore):
    def write(self, data: Mapping[str, Any]) -> WriteResult:
        with self._session("preference write") as db:
            row = Preference(
                session_id=data.get("session_id"),
                user_ip=data.get("user_ip"),
                **{name: data.get(name) for name in PREFERENCE_FIELDS},
            )
            db.add(row)
            db.commit()
            return WriteResult(id=int(row.id), rows_affected=1)

    def read_one(self, record_id: int) -> PreferenceRecord | None:
        with self._session("preference read") as db:
            row = db.query(Preference).filter(Preference.id == record_id).one_or_none()
            return PreferenceRecord.from_row(row) if row is not None else None

    def read_latest_for_session(self, session_id: str) -> PreferenceRecord | None:
        with self._session("preference read") as db:
            row = (
                db.query(Preference)
                .filter(Preference.session_id == session_id)
                .order_by(Preference.created_at.desc(), Preference.id.desc())
                .first()
            )
            return PreferenceRecord.from_row(row) if row is not None else None

    def read_many(self, limit: int, offset: int = 0) -> list[PreferenceRecord]:
        with self._session("preference listing") as db:
            rows = (
                db.query(Preference)
                .order_by(Preference.created_at.desc(), Preference.id.desc())
                .limit(limit)
                .offset(offset)
                .all()
            )
            return [PreferenceRecord.from_row(row) for row in rows]

    def count(self) -> int:
        with self._session("preference count") as db:
            return int(db.query(func.count(Preference.id)).scalar() or 0)

    def update(self, record_id: int, data: Mapping[str, Any]) -> WriteResult:
        # Full overwrite: fields missing from `data` are cleared, not kept.
        with self._session("preference update") as db:
            row = db.query(Preference).filter(Preference.id == record_id).one_or_none()
            if row is None:
                return WriteResult(id=record_id, rows_affected=0)
            for name in PREFERENCE_FIELDS:
                setattr(row, name, data.get(name))
            db.commit()
            return WriteResult(id=record_id, rows_affected=1)

    def delete(self, record_id: int) -> WriteResult:
        with self._session("preference delete") as db:
            deleted = db.query(Preference).filter(Preference.id == record_id).delete()
            db.commit()
            return WriteResult(id=record_id, rows_affected=int(deleted))

    def count_by(self, column_name: str, *, limit: int | None = None) -> list[tuple[str, int]]:
        """Group non-empty raw values of ``column_name`` and count them.

        Ordered by count descending, then by the value ascending so equal
        counts come back in a stable order.
        """

        column = GROUPABLE_COLUMNS[column_name]
        count_expr = func.count(Preference.id)
        with self._session(f"preference count by {column_name}") as db:
            query = (
                db.query(column, count_expr.label("count"))
                .filter(column.isnot(None))
                .filter(column != "")
                .group_by(column)
                .order_by(count_expr.desc(), column.asc())
            )
            if limit is not None:
                query = query.limit(limit)
            return [(str(value), int(count)) for value, count in query.all()]

    def count_by_day(self, since: datetime) -> list[tuple[date, int]]:
        day_expr = func.date(Preference.created_at)
        with self._session("preference count by day") as db:
            rows = (
                db.query(day_expr.label("d"), func.count(Preference.id).label("count"))
                .filter(Preference.created_at >= since)
                .group_by(day_expr)
                .order_by(day_expr.desc())
                .all()
            )

        result: list[tuple[date, int]] = []
        for d_raw, count in rows:
            # func.date may return date (mysql) or string (sqlite)
            d = d_raw if isinstance(d_raw, date) else date.fromisoformat(str(d_raw))
            result.append((d, int(count)))
        return result


class SearchLogStore(_SessionStore):
    def write(self, entry: SearchLogEntry) -> WriteResult:
        with self._session("search log write") as db:
            row = SearchLog(
                session_id=entry.session_id or ANONYMOUS_SESSION,
                user_ip=entry.user_ip,
                search_params=json.dumps(entry.search_params, ensure_ascii=False),
                results_count=int(entry.results_count),
            )
            db.add(row)
            db.commit()
            return WriteResult(id=int(row.id), rows_affected=1)
