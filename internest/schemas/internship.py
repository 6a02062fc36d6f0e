from __future__ import annotations

from internest.data.internships import Internship
from internest.schemas.common import ApiModel, Pagination


class InternshipFilterEcho(ApiModel):
    education: str | None = None
    skills: str | None = None
    sector: str | None = None
    location: str | None = None


class InternshipListResponse(ApiModel):
    success: bool = True
    data: list[Internship]
    pagination: Pagination
    filters: InternshipFilterEcho


class InternshipResponse(ApiModel):
    success: bool = True
    data: Internship
