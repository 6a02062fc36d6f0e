from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone


SESSION_RE = re.compile(r"^session_\d+_[a-z0-9]{9}$")


def _submit(client, payload: dict, headers: dict | None = None):
    return client.post("/api/preferences", json=payload, headers=headers or {})


def test_submit_without_session_generates_one(client) -> None:
    r = _submit(client, {"education": "12th Pass", "sector": "Marketing"})
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Preferences saved successfully"

    data = body["data"]
    assert isinstance(data["id"], int)
    assert SESSION_RE.match(data["sessionId"])
    assert data["preferences"]["education"] == "12th Pass"
    assert data["preferences"]["sector"] == "Marketing"


def test_submit_uses_body_session_over_header(client) -> None:
    r = _submit(client, {"sessionId": "from-body", "skills": "Python"}, headers={"X-Session-Id": "from-header"})
    assert r.json()["data"]["sessionId"] == "from-body"

    r2 = _submit(client, {"skills": "Python"}, headers={"X-Session-Id": "from-header"})
    assert r2.json()["data"]["sessionId"] == "from-header"


def test_submit_keeps_explicit_session_id_unchanged(client) -> None:
    r = _submit(client, {"sessionId": "  padded-id  ", "sector": "  IT  "})
    assert r.status_code == 201
    data = r.json()["data"]
    assert data["sessionId"] == "  padded-id  "
    assert data["preferences"]["sector"] == "IT"


def test_submit_checks_length_after_trimming(client) -> None:
    r = _submit(client, {"education": "  " + "x" * 100 + "  "})
    assert r.status_code == 201
    assert r.json()["data"]["preferences"]["education"] == "x" * 100


def test_submit_rejects_over_long_fields(client) -> None:
    r = _submit(client, {"education": "x" * 101})
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["message"] == "Validation errors"
    assert body["errors"][0]["field"] == "education"


def test_submit_rejects_non_string_fields(client) -> None:
    r = _submit(client, {"skills": 42})
    assert r.status_code == 400


def test_latest_record_for_session_wins(client, insert_preference) -> None:
    now = datetime.now(timezone.utc)
    insert_preference(session_id="s-1", sector="Finance", created_at=now - timedelta(days=2))
    latest_id = insert_preference(session_id="s-1", sector="Healthcare", created_at=now - timedelta(hours=1))
    insert_preference(session_id="s-2", sector="Education", created_at=now)

    r = client.get("/api/preferences/s-1")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["id"] == latest_id
    assert data["sessionId"] == "s-1"
    assert data["preferences"]["sector"] == "Healthcare"


def test_unknown_session_is_404(client) -> None:
    r = client.get("/api/preferences/session_missing")
    assert r.status_code == 404
    assert r.json()["message"] == "No preferences found for this session"


def test_submitted_blank_fields_are_stored_as_null(client) -> None:
    r = _submit(client, {"sessionId": "blank", "education": "   ", "skills": "SQL"})
    assert r.status_code == 201
    stored = client.get("/api/preferences/blank").json()["data"]["preferences"]
    assert stored["education"] is None
    assert stored["skills"] == "SQL"


def test_listing_paginates_with_true_total(client, insert_preference) -> None:
    base = datetime.now(timezone.utc) - timedelta(days=1)
    ids = [insert_preference(sector=f"Sector {i}", created_at=base + timedelta(minutes=i)) for i in range(5)]

    r = client.get("/api/preferences", params={"page": 2, "limit": 2})
    assert r.status_code == 200
    body = r.json()

    newest_first = list(reversed(ids))
    assert [item["id"] for item in body["data"]] == newest_first[2:4]
    assert body["pagination"] == {"page": 2, "limit": 2, "total": 5, "totalPages": 3}


def test_listing_rejects_limit_out_of_range(client) -> None:
    assert client.get("/api/preferences", params={"limit": 0}).status_code == 400
    assert client.get("/api/preferences", params={"limit": 101}).status_code == 400
    assert client.get("/api/preferences", params={"limit": "ten"}).status_code == 400
    assert client.get("/api/preferences", params={"page": 0}).status_code == 400
    assert client.get("/api/preferences", params={"limit": 100}).status_code == 200


def test_update_overwrites_all_fields(client) -> None:
    created = _submit(client, {"sessionId": "upd", "education": "Diploma", "skills": "Excel", "sector": "Finance"})
    pid = created.json()["data"]["id"]

    r = client.put(f"/api/preferences/{pid}", json={"skills": "Python, SQL"})
    assert r.status_code == 200
    assert r.json()["message"] == "Preferences updated successfully"
    assert r.json()["data"]["id"] == pid

    stored = client.get("/api/preferences/upd").json()["data"]["preferences"]
    assert stored == {"education": None, "skills": "Python, SQL", "sector": None, "location": None}


def test_update_missing_record_is_404(client) -> None:
    r = client.put("/api/preferences/12345", json={"sector": "IT"})
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Preference not found"}


def test_delete_record(client) -> None:
    pid = _submit(client, {"sessionId": "del", "sector": "IT"}).json()["data"]["id"]

    r = client.delete(f"/api/preferences/{pid}")
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Preferences deleted successfully"}

    assert client.get("/api/preferences/del").status_code == 404
    assert client.delete(f"/api/preferences/{pid}").status_code == 404
