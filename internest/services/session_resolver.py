from __future__ import annotations

import secrets
import string
import time

from fastapi import Request


SESSION_HEADER = "x-session-id"
_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
_SUFFIX_LENGTH = 9


def generate_session_id(now_ms: int | None = None) -> str:
    millis = int(time.time() * 1000) if now_ms is None else int(now_ms)
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"session_{millis}_{suffix}"


def resolve_session_id(body_session_id: str | None, header_session_id: str | None) -> str:
    # Caller-supplied ids are used verbatim; collisions are accepted.
    if body_session_id:
        return body_session_id
    if header_session_id:
        return header_session_id
    return generate_session_id()


def resolve_client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded
    return request.client.host if request.client else None
