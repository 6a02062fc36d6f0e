from __future__ import annotations

import json
import os
import sys

from fastapi.testclient import TestClient

# Ensure internest/ is importable when running as a script.
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from internest.main import app


SAMPLES = [
    {
        "education": "Bachelor's Degree",
        "skills": "JavaScript, React, Node.js",
        "sector": "Information Technology",
        "location": "Karnataka",
    },
    {
        "education": "Master's Degree",
        "skills": "Python, Machine Learning, Data Science",
        "sector": "Healthcare",
        "location": "Maharashtra",
    },
    {
        "education": "Diploma",
        "skills": "Digital Marketing, SEO",
        "sector": "Education",
        "location": "Delhi",
    },
]


def main() -> int:
    with TestClient(app) as client:
        for i, sample in enumerate(SAMPLES, start=1):
            r = client.post("/api/preferences", json=sample)
            body = r.json()
            print(f"POST /api/preferences #{i} ->", r.status_code, body.get("message"))
            if r.status_code != 201:
                print(json.dumps(body, indent=2, ensure_ascii=False))
                return 1
            print("  id=", body["data"]["id"], "session=", body["data"]["sessionId"])

        r2 = client.get("/api/preferences/admin/all")
        print("\nGET /api/preferences/admin/all ->", r2.status_code, "count=", r2.json().get("count"))

        r3 = client.get("/api/preferences/admin/all", params={"export_format": "ml"})
        payload = r3.json()
        print("\nGET /api/preferences/admin/all?export_format=ml ->", r3.status_code)
        if payload.get("data"):
            print(json.dumps(payload["data"][0], indent=2, ensure_ascii=False))

        r4 = client.get("/api/preferences/stats/overview")
        print("\nGET /api/preferences/stats/overview ->", r4.status_code)
        print(json.dumps(r4.json(), indent=2, ensure_ascii=False))
        if r4.status_code != 200:
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
