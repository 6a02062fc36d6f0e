from __future__ import annotations

import pytest

from internest.services.normalizer import (
    normalize_education,
    normalize_location,
    normalize_preference,
    normalize_sector,
    normalize_skills,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10th Pass", "secondary"),
        ("12th Pass", "higher_secondary"),
        ("Diploma", "diploma"),
        ("Bachelor's Degree", "bachelor"),
        ("Master's Degree", "master"),
        ("PhD", "doctorate"),
        ("Unknown value", "unknown"),
        ("bachelor's degree", "unknown"),
        ("", "unknown"),
        (None, "unknown"),
    ],
)
def test_normalize_education_uses_exact_table_lookup(raw, expected) -> None:
    assert normalize_education(raw) == expected


def test_normalize_skills_splits_trims_and_lowercases_in_order() -> None:
    assert normalize_skills(" Python, SQL ,Excel,python") == ["python", "sql", "excel", "python"]
    assert normalize_skills("") == []
    assert normalize_skills(None) == []


def test_normalize_sector_and_location_collapse_whitespace_runs() -> None:
    assert normalize_sector("Information   Technology") == "information_technology"
    assert normalize_sector("Health\tCare\nServices") == "health_care_services"
    assert normalize_location("New Delhi") == "new_delhi"
    assert normalize_sector(None) == "unknown"
    assert normalize_location("") == "unknown"


@pytest.mark.parametrize(
    "raw",
    ["Information Technology", "  Mixed\t Case  ", "already_normal", "PhD", "Unknown value", "", None, "Ünïcode  Städt"],
)
def test_normalizers_are_idempotent(raw) -> None:
    for fn in (normalize_education, normalize_sector, normalize_location):
        once = fn(raw)
        assert fn(once) == once


def test_normalize_preference_builds_canonical_features() -> None:
    features = normalize_preference(
        {"education_level": "Master's Degree", "skills": "ML, Data Science", "sector": "Health Care", "location": None}
    )
    assert features == {
        "education_level": "master",
        "skills": ["ml", "data science"],
        "sector": "health_care",
        "location": "unknown",
    }
