from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Header, Query, Request, status
from fastapi.concurrency import run_in_threadpool

from internest.db.stores import PreferenceRecord, PreferenceStore
from internest.errors import NotFoundError
from internest.routers.dependencies import get_preference_store
from internest.schemas.common import MessageResponse, Pagination
from internest.schemas.export import (
    ExportPagination,
    FeatureExportResponse,
    FeatureVector,
    RawExportResponse,
    RawPreferenceRow,
)
from internest.schemas.preference import (
    PreferenceCreated,
    PreferenceCreateResponse,
    PreferenceFields,
    PreferenceListResponse,
    PreferenceOut,
    PreferenceResponse,
    PreferenceSubmission,
    PreferenceUpdated,
    PreferenceUpdateResponse,
)
from internest.schemas.stats import (
    DailyCount,
    EducationCount,
    LocationCount,
    SectorCount,
    StatsOverview,
    StatsResponse,
)
from internest.services.internship_filter import total_pages
from internest.services.ml_export import to_feature_vector, to_normalized_vector
from internest.services.preference_stats import aggregate_preferences
from internest.services.session_resolver import resolve_client_ip, resolve_session_id


router = APIRouter(prefix="/preferences", tags=["preferences"])

logger = logging.getLogger(__name__)

PREFERENCE_NOT_FOUND = "Preference not found"


def _fields_of(record: PreferenceRecord) -> PreferenceFields:
    return PreferenceFields(
        education=record.education_level,
        skills=record.skills,
        sector=record.sector,
        location=record.location,
    )


def _to_out(record: PreferenceRecord) -> PreferenceOut:
    return PreferenceOut(
        id=record.id,
        session_id=record.session_id,
        user_ip=record.user_ip,
        preferences=_fields_of(record),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _submitted_fields(payload: PreferenceSubmission) -> PreferenceFields:
    return PreferenceFields(
        education=payload.education,
        skills=payload.skills,
        sector=payload.sector,
        location=payload.location,
    )


@router.post("", response_model=PreferenceCreateResponse, status_code=status.HTTP_201_CREATED)
async def submit_preferences(
    payload: PreferenceSubmission,
    request: Request,
    x_session_id: str | None = Header(default=None),
    store: PreferenceStore = Depends(get_preference_store),
) -> PreferenceCreateResponse:
    session_id = resolve_session_id(payload.session_id, x_session_id)
    data = {
        "session_id": session_id,
        "user_ip": resolve_client_ip(request),
        **payload.to_store_fields(),
    }
    result = await run_in_threadpool(store.write, data)
    logger.info("preferences.saved id=%s session_id=%s", result.id, session_id)

    return PreferenceCreateResponse(
        message="Preferences saved successfully",
        data=PreferenceCreated(id=result.id, session_id=session_id, preferences=_submitted_fields(payload)),
    )


@router.get("", response_model=PreferenceListResponse)
async def list_preferences(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    store: PreferenceStore = Depends(get_preference_store),
) -> PreferenceListResponse:
    offset = (page - 1) * limit
    records = await run_in_threadpool(store.read_many, limit, offset)
    total = await run_in_threadpool(store.count)

    return PreferenceListResponse(
        data=[_to_out(record) for record in records],
        pagination=Pagination(page=page, limit=limit, total=total, total_pages=total_pages(total, limit)),
    )


@router.get("/stats/overview", response_model=StatsResponse)
async def preference_stats(store: PreferenceStore = Depends(get_preference_store)) -> StatsResponse:
    stats = await aggregate_preferences(store)
    return StatsResponse(
        data=StatsOverview(
            total=stats.total,
            by_education=[EducationCount(education_level=k, count=c) for k, c in stats.by_education],
            by_sector=[SectorCount(sector=k, count=c) for k, c in stats.by_sector],
            by_location=[LocationCount(location=k, count=c) for k, c in stats.by_location],
            recent=[DailyCount(date=d, count=c) for d, c in stats.recent],
        )
    )


@router.get("/admin/all", response_model=RawExportResponse | FeatureExportResponse)
async def export_preferences(
    limit: int = Query(default=100, ge=1),
    offset: int = Query(default=0, ge=0),
    export_format: Literal["ml", "normalized"] | None = Query(default=None),
    store: PreferenceStore = Depends(get_preference_store),
) -> RawExportResponse | FeatureExportResponse:
    records = await run_in_threadpool(store.read_many, limit, offset)

    if export_format == "ml":
        vectors = [FeatureVector.model_validate(to_feature_vector(r)) for r in records]
        return FeatureExportResponse(format="ml_ready", count=len(vectors), data=vectors)
    if export_format == "normalized":
        vectors = [FeatureVector.model_validate(to_normalized_vector(r)) for r in records]
        return FeatureExportResponse(format="normalized", count=len(vectors), data=vectors)

    rows = [
        RawPreferenceRow(
            id=r.id,
            session_id=r.session_id,
            user_ip=r.user_ip,
            education=r.education_level,
            skills=r.skills,
            sector=r.sector,
            location=r.location,
            created_at=r.created_at,
            updated_at=r.updated_at,
        )
        for r in records
    ]
    return RawExportResponse(count=len(rows), data=rows, pagination=ExportPagination(limit=limit, offset=offset))


@router.get("/{session_id}", response_model=PreferenceResponse)
async def get_session_preferences(
    session_id: str,
    store: PreferenceStore = Depends(get_preference_store),
) -> PreferenceResponse:
    record = await run_in_threadpool(store.read_latest_for_session, session_id)
    if record is None:
        raise NotFoundError("No preferences found for this session")
    return PreferenceResponse(data=_to_out(record))


@router.put("/{preference_id}", response_model=PreferenceUpdateResponse)
async def update_preferences(
    preference_id: int,
    payload: PreferenceSubmission,
    store: PreferenceStore = Depends(get_preference_store),
) -> PreferenceUpdateResponse:
    result = await run_in_threadpool(store.update, preference_id, payload.to_store_fields())
    if result.rows_affected == 0:
        raise NotFoundError(PREFERENCE_NOT_FOUND)
    return PreferenceUpdateResponse(
        message="Preferences updated successfully",
        data=PreferenceUpdated(id=preference_id, preferences=_submitted_fields(payload)),
    )


@router.delete("/{preference_id}", response_model=MessageResponse)
async def delete_preferences(
    preference_id: int,
    store: PreferenceStore = Depends(get_preference_store),
) -> MessageResponse:
    result = await run_in_threadpool(store.delete, preference_id)
    if result.rows_affected == 0:
        raise NotFoundError(PREFERENCE_NOT_FOUND)
    return MessageResponse(message="Preferences deleted successfully")
