from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request

from internest.data.internships import Internship, get_internship_by_id
from internest.db.stores import SearchLogStore
from internest.errors import NotFoundError
from internest.routers.dependencies import get_catalog, get_search_log_store
from internest.schemas.common import Pagination
from internest.schemas.internship import InternshipFilterEcho, InternshipListResponse, InternshipResponse
from internest.services.internship_filter import InternshipFilters, search_internships
from internest.services.search_activity import build_search_log_entry, record_search_activity
from internest.services.session_resolver import SESSION_HEADER, resolve_client_ip


router = APIRouter(prefix="/internships", tags=["internships"])


@router.get("", response_model=InternshipListResponse)
def list_internships(
    request: Request,
    background_tasks: BackgroundTasks,
    education: str | None = Query(default=None, description="Case-insensitive substring of the education requirement"),
    skills: str | None = Query(default=None, description="Comma-separated skills; any overlap matches"),
    sector: str | None = Query(default=None, description="Case-insensitive substring of the sector"),
    location: str | None = Query(default=None, description="Case-insensitive substring of the location"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1),
    catalog: list[Internship] = Depends(get_catalog),
    search_logs: SearchLogStore = Depends(get_search_log_store),
) -> InternshipListResponse:
    filters = InternshipFilters(education=education, skills=skills, sector=sector, location=location)
    result = search_internships(catalog, filters, page=page, limit=limit)

    response = InternshipListResponse(
        data=result.items,
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
        filters=InternshipFilterEcho(education=education, skills=skills, sector=sector, location=location),
    )

    # Audit row is written after the response is sent; failures never reach the caller.
    entry = build_search_log_entry(
        session_id=request.headers.get(SESSION_HEADER),
        user_ip=resolve_client_ip(request),
        params=dict(request.query_params),
        payload={"data": result.items},
    )
    background_tasks.add_task(record_search_activity, search_logs, entry)
    return response


@router.get("/{internship_id}", response_model=InternshipResponse)
def get_internship(
    internship_id: int,
    catalog: list[Internship] = Depends(get_catalog),
) -> InternshipResponse:
    internship = get_internship_by_id(catalog, internship_id)
    if internship is None:
        raise NotFoundError("Internship not found")
    return InternshipResponse(data=internship)
