"""Canonicalization of free-text preference fields.

These functions feed matching and the normalized export. The ML export in
``internest.services.ml_export`` intentionally does less: it only substitutes
fallbacks and never lower-cases or rewrites whitespace. Keep the two apart.
"""

from __future__ import annotations

import re
from typing import Any, Mapping


UNKNOWN = "unknown"

# Display labels offered by the frontend, plus each canonical token mapped to
# itself so normalizing an already-normalized value is a no-op.
EDUCATION_LEVELS: dict[str, str] = {
    "10th Pass": "secondary",
    "12th Pass": "higher_secondary",
    "Diploma": "diploma",
    "Bachelor's Degree": "bachelor",
    "Master's Degree": "master",
    "PhD": "doctorate",
    "secondary": "secondary",
    "higher_secondary": "higher_secondary",
    "diploma": "diploma",
    "bachelor": "bachelor",
    "master": "master",
    "doctorate": "doctorate",
    UNKNOWN: UNKNOWN,
}

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_education(raw: str | None) -> str:
    if not raw:
        return UNKNOWN
    return EDUCATION_LEVELS.get(raw, UNKNOWN)


def normalize_skills(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [skill.strip().lower() for skill in raw.split(",")]


def _normalize_category(raw: str | None) -> str:
    if not raw:
        return UNKNOWN
    return _WHITESPACE_RE.sub("_", raw.lower())


def normalize_sector(raw: str | None) -> str:
    return _normalize_category(raw)


def normalize_location(raw: str | None) -> str:
    return _normalize_category(raw)


def normalize_preference(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "education_level": normalize_education(fields.get("education_level")),
        "skills": normalize_skills(fields.get("skills")),
        "sector": normalize_sector(fields.get("sector")),
        "location": normalize_location(fields.get("location")),
    }
