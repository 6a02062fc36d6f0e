"""Inspect stored preferences and preview the normalized export (read-only).

Usage:
  python scripts/inspect_preferences.py
  python scripts/inspect_preferences.py --samples 10
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import inspect  # noqa: E402

from internest.config import build_sqlalchemy_db_url, settings  # noqa: E402
from internest.database import build_engine, make_session_factory  # noqa: E402
from internest.db.stores import PreferenceStore  # noqa: E402
from internest.errors import StorageError  # noqa: E402
from internest.services.ml_export import to_normalized_vector  # noqa: E402


def _print_tables(engine) -> None:
    inspector = inspect(engine)
    print("Available tables:")
    for table in sorted(inspector.get_table_names()):
        print(" -", table)

    if "preferences" in inspector.get_table_names():
        print("\npreferences columns:")
        for col in inspector.get_columns("preferences"):
            print(" -", col["name"], col["type"], "NULL" if col.get("nullable") else "NOT NULL")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--samples", type=int, default=5, help="Number of latest records to print")
    args = parser.parse_args(argv)

    engine = build_engine(build_sqlalchemy_db_url(settings))
    store = PreferenceStore(make_session_factory(engine))
    try:
        _print_tables(engine)

        try:
            total = store.count()
        except StorageError as exc:
            print(f"ERROR counting preferences: {exc}")
            return 1
        print(f"\nTotal stored preferences: {total}")
        if total == 0:
            print("No preferences found. Submit some data through the API first.")
            return 0

        samples = store.read_many(args.samples, 0)
        print(f"\nLatest {len(samples)} preferences:")
        for i, rec in enumerate(samples, start=1):
            print(f"\n {i}. id={rec.id} session={rec.session_id} ip={rec.user_ip}")
            print(f"    education: {rec.education_level or 'Not specified'}")
            print(f"    skills:    {rec.skills or 'Not specified'}")
            print(f"    sector:    {rec.sector or 'Not specified'}")
            print(f"    location:  {rec.location or 'Not specified'}")
            print(f"    created:   {rec.created_at}")

        print("\nNormalized feature sample:")
        print(json.dumps(to_normalized_vector(samples[0]), indent=2, default=str, ensure_ascii=False))
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
