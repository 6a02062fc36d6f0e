from __future__ import annotations

from datetime import datetime

from internest.db.stores import PreferenceRecord
from internest.services.ml_export import to_feature_vector, to_normalized_vector
from internest.services.normalizer import normalize_sector, normalize_skills


def _record(**overrides) -> PreferenceRecord:
    base = dict(
        id=7,
        session_id="session_1_abcdefghi",
        user_ip="127.0.0.1",
        education_level="Bachelor's Degree",
        skills=" Python , Machine Learning,SQL",
        sector="Information Technology",
        location="New Delhi",
        created_at=datetime(2026, 1, 2, 3, 4, 5),
        updated_at=datetime(2026, 1, 2, 3, 4, 5),
    )
    base.update(overrides)
    return PreferenceRecord(**base)


def test_feature_vector_keeps_raw_text() -> None:
    vector = to_feature_vector(_record())
    assert vector == {
        "id": 7,
        "features": {
            "education_level": "Bachelor's Degree",
            "skills": ["Python", "Machine Learning", "SQL"],
            "sector": "Information Technology",
            "location": "New Delhi",
        },
        "metadata": {
            "created_at": datetime(2026, 1, 2, 3, 4, 5),
            "session_id": "session_1_abcdefghi",
            "user_ip": "127.0.0.1",
        },
    }


def test_feature_vector_fallback_is_not_specified() -> None:
    features = to_feature_vector(_record(education_level=None, skills=None, sector="", location=None))["features"]
    assert features == {
        "education_level": "not_specified",
        "skills": [],
        "sector": "not_specified",
        "location": "not_specified",
    }


def test_export_and_normalizer_paths_differ() -> None:
    record = _record()
    exported = to_feature_vector(record)["features"]
    normalized = to_normalized_vector(record)["features"]

    assert exported["sector"] == "Information Technology"
    assert normalized["sector"] == normalize_sector(record.sector) == "information_technology"
    assert exported["skills"] == ["Python", "Machine Learning", "SQL"]
    assert normalized["skills"] == normalize_skills(record.skills) == ["python", "machine learning", "sql"]
    assert normalized["education_level"] == "bachelor"

    empty = _record(sector=None)
    assert to_feature_vector(empty)["features"]["sector"] == "not_specified"
    assert to_normalized_vector(empty)["features"]["sector"] == "unknown"
