from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from fastapi.concurrency import run_in_threadpool

from internest.db.stores import PreferenceStore
from internest.errors import AggregationError


logger = logging.getLogger(__name__)

RECENT_WINDOW_DAYS = 30
TOP_LOCATIONS = 10


@dataclass(frozen=True)
class PreferenceStats:
    total: int
    by_education: list[tuple[str, int]]
    by_sector: list[tuple[str, int]]
    by_location: list[tuple[str, int]]
    recent: list[tuple[date, int]]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def recent_window_start(now: datetime, days: int = RECENT_WINDOW_DAYS) -> datetime:
    """Midnight UTC ``days`` calendar days before ``now``'s day."""

    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    start_day = now.date() - timedelta(days=days)
    return datetime.combine(start_day, datetime.min.time())


async def aggregate_preferences(store: PreferenceStore, *, now: datetime | None = None) -> PreferenceStats:
    since = recent_window_start(now or _utc_now())

    try:
        total, by_education, by_sector, by_location, recent = await asyncio.gather(
            run_in_threadpool(store.count),
            run_in_threadpool(store.count_by, "education_level"),
            run_in_threadpool(store.count_by, "sector"),
            run_in_threadpool(store.count_by, "location", limit=TOP_LOCATIONS),
            run_in_threadpool(store.count_by_day, since),
        )
    except Exception as exc:
        logger.warning("preference stats sub-query failed: %s", exc)
        raise AggregationError(str(exc)) from exc

    return PreferenceStats(
        total=total,
        by_education=by_education,
        by_sector=by_sector,
        by_location=by_location,
        recent=recent,
    )
