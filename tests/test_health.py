from __future__ import annotations


def test_health_check(client) -> None:
    r = client.get("/health/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_db_health_masks_url(client) -> None:
    r = client.get("/health/db")
    assert r.status_code == 200
    body = r.json()
    assert body["orm"] == "ok"
    assert body["db_url"].startswith("sqlite")
    assert body["catalog_size"] == 8
