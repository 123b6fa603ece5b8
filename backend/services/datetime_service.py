"""Datetime helpers for stored (UTC) creation times."""

from __future__ import annotations

from datetime import UTC, datetime


def to_utc(dt: datetime) -> datetime:
    """Convert to UTC, treating naive values as already UTC.

    Stored creation times are UTC, so range bounds built in the site
    timezone are converted before they reach a query.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_iso(dt: datetime) -> str:
    """Format datetime as ISO 8601 for JSON serialization."""
    return to_utc(dt).isoformat()
