"""Application-level exception types.

Convention:
- ``InternalServerError``: for errors whose details must never reach clients.
  The global handler logs the full message at ERROR and returns a generic
  "Internal server error" (500) to the client.
- ``PermalinkError`` and its subclasses: the permalink engine's failure
  taxonomy.  They are raised inside the engine and converted into neutral
  results (no correction / not found) at its boundary, so they never reach
  the web layer as exceptions.
"""

from __future__ import annotations

from enum import StrEnum


class InternalServerError(Exception):
    """Raised for internal errors whose details must not be exposed to clients.

    The global exception handler in ``backend/main.py`` catches this, logs
    the full message server-side, and returns HTTP 500 with a generic
    ``"Internal server error"`` detail.
    """


class PermalinkErrorKind(StrEnum):
    """Why a permalink could not be matched, corrected or resolved."""

    NO_MATCH = "no_match"
    INVALID_CAPTURE = "invalid_capture"
    CATEGORY_NOT_FOUND = "category_not_found"
    ENTRY_NOT_FOUND = "entry_not_found"


class PermalinkError(Exception):
    """Base class for permalink engine failures."""

    kind: PermalinkErrorKind


class NoMatchError(PermalinkError):
    """The path does not conform to the permalink format (literal mismatch)."""

    kind = PermalinkErrorKind.NO_MATCH


class InvalidCaptureError(PermalinkError):
    """A captured value cannot be interpreted as its expected type."""

    kind = PermalinkErrorKind.INVALID_CAPTURE

    def __init__(self, field: str, value: str, reason: str = "") -> None:
        self.field = field
        self.value = value
        detail = f"Invalid value for {field}: {value!r}"
        if reason:
            detail = f"{detail} ({reason})"
        super().__init__(detail)


class CategoryNotFoundError(PermalinkError):
    kind = PermalinkErrorKind.CATEGORY_NOT_FOUND

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Category not found: {token!r}")


class EntryNotFoundError(PermalinkError):
    kind = PermalinkErrorKind.ENTRY_NOT_FOUND
