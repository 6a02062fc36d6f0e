from __future__ import annotations

from typing import Any


class InternestError(Exception):
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(InternestError):
    status_code = 400
    message = "Validation errors"

    def __init__(self, errors: list[dict[str, Any]], message: str | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class NotFoundError(InternestError):
    status_code = 404
    message = "Not found"


class StorageError(InternestError):
    status_code = 500
    message = "Storage operation failed"


class AggregationError(InternestError):
    status_code = 500
    message = "Failed to retrieve statistics"
