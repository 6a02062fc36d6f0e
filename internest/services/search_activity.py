from __future__ import annotations

import logging
from typing import Any, Mapping

from internest.db.stores import SearchLogEntry, SearchLogStore
from internest.models.search_log import ANONYMOUS_SESSION


logger = logging.getLogger(__name__)


def count_results(payload: Mapping[str, Any] | None) -> int:
    data = (payload or {}).get("data")
    return len(data) if isinstance(data, list) else 0


def build_search_log_entry(
    *,
    session_id: str | None,
    user_ip: str | None,
    params: Mapping[str, Any],
    payload: Mapping[str, Any] | None,
) -> SearchLogEntry:
    return SearchLogEntry(
        session_id=session_id or ANONYMOUS_SESSION,
        user_ip=user_ip,
        search_params=dict(params),
        results_count=count_results(payload),
    )


def record_search_activity(store: SearchLogStore, entry: SearchLogEntry) -> None:
    """Background task: persist one search log row (runs after the response is sent)."""
    try:
        store.write(entry)
    except Exception:
        logger.exception(
            "Error logging search activity session_id=%s results_count=%s",
            entry.session_id,
            entry.results_count,
        )
