"""Export shapes for downstream model training.

``to_feature_vector`` is a display/export reshaping of the stored text and is
not the canonicalization used for matching: values keep their casing and
spacing, and missing values become ``not_specified`` rather than the
normalizer's ``unknown``.
"""

from __future__ import annotations

from typing import Any

from internest.db.stores import PreferenceRecord
from internest.services.normalizer import normalize_preference


NOT_SPECIFIED = "not_specified"


def split_skills(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [skill.strip() for skill in raw.split(",")]


def _metadata(record: PreferenceRecord) -> dict[str, Any]:
    return {
        "created_at": record.created_at,
        "session_id": record.session_id,
        "user_ip": record.user_ip,
    }


def to_feature_vector(record: PreferenceRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "features": {
            "education_level": record.education_level or NOT_SPECIFIED,
            "skills": split_skills(record.skills),
            "sector": record.sector or NOT_SPECIFIED,
            "location": record.location or NOT_SPECIFIED,
        },
        "metadata": _metadata(record),
    }


def to_normalized_vector(record: PreferenceRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "features": normalize_preference(record.fields()),
        "metadata": _metadata(record),
    }
