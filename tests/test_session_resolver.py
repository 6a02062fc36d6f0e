from __future__ import annotations

import re

from internest.services.session_resolver import generate_session_id, resolve_session_id


SESSION_RE = re.compile(r"^session_\d+_[a-z0-9]{9}$")


def test_generate_session_id_shape() -> None:
    assert SESSION_RE.match(generate_session_id())
    assert generate_session_id(now_ms=1700000000123).startswith("session_1700000000123_")


def test_generated_ids_differ() -> None:
    ids = {generate_session_id(now_ms=1) for _ in range(50)}
    assert len(ids) == 50


def test_resolve_prefers_body_then_header() -> None:
    assert resolve_session_id("from-body", "from-header") == "from-body"
    assert resolve_session_id(None, "from-header") == "from-header"
    assert resolve_session_id("", "from-header") == "from-header"


def test_resolve_uses_supplied_id_verbatim() -> None:
    assert resolve_session_id("  not a session format! ", None) == "  not a session format! "


def test_resolve_generates_when_absent() -> None:
    assert SESSION_RE.match(resolve_session_id(None, None))
    assert SESSION_RE.match(resolve_session_id("", ""))
