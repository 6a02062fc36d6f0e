from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from internest.data.internships import Internship


T = TypeVar("T")


@dataclass(frozen=True)
class InternshipFilters:
    education: str | None = None
    skills: str | None = None
    sector: str | None = None
    location: str | None = None


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int
    total_pages: int


def _contains(haystack: str | None, needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def split_skill_query(skills: str) -> list[str]:
    return [skill.strip().lower() for skill in skills.split(",")]


def _skills_overlap(query_skills: list[str], required: Sequence[str]) -> bool:
    required_lower = [skill.lower() for skill in required]
    return any(q in r for q in query_skills for r in required_lower)


def matches(internship: Internship, filters: InternshipFilters) -> bool:
    # Absent (None or empty) predicates impose no constraint.
    if filters.education and not _contains(internship.education_requirements, filters.education):
        return False
    if filters.skills and not _skills_overlap(split_skill_query(filters.skills), internship.skills_required):
        return False
    if filters.sector and not _contains(internship.sector, filters.sector):
        return False
    if filters.location and not _contains(internship.location, filters.location):
        return False
    return True


def filter_internships(catalog: Sequence[Internship], filters: InternshipFilters) -> list[Internship]:
    return [internship for internship in catalog if matches(internship, filters)]


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    start = (page - 1) * limit
    return Page(
        items=list(items[start : start + limit]),
        total=len(items),
        page=page,
        limit=limit,
        total_pages=total_pages(len(items), limit),
    )


def search_internships(
    catalog: Sequence[Internship], filters: InternshipFilters, page: int = 1, limit: int = 10
) -> Page[Internship]:
    return paginate(filter_internships(catalog, filters), page, limit)
