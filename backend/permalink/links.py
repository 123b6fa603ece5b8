"""Build an entry's own permalink from the active format."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pendulum

from backend.permalink.tokens import render_format

if TYPE_CHECKING:
    from datetime import datetime


def entry_fields(
    entry_id: int,
    slug: str | None,
    created_at: datetime,
    *,
    category_slug: str | None = None,
    tz: str = "UTC",
) -> dict[str, str]:
    """Placeholder values describing one entry."""
    local = pendulum.instance(created_at).in_timezone(tz)
    fields = {
        "year": f"{local.year:04d}",
        "month": f"{local.month:02d}",
        "monthnum": f"{local.month:02d}",
        "day": f"{local.day:02d}",
        "hour": f"{local.hour:02d}",
        "minute": f"{local.minute:02d}",
        "second": f"{local.second:02d}",
        "post_id": str(entry_id),
        "id": str(entry_id),
        "postname": slug or str(entry_id),
        "slug": slug or str(entry_id),
    }
    if category_slug:
        fields["category"] = category_slug
    return fields


def build_entry_path(
    fmt: str,
    entry_id: int,
    slug: str | None,
    created_at: datetime,
    *,
    category_slug: str | None = None,
    tz: str = "UTC",
) -> str:
    """Render ``fmt`` for the given entry.

    Placeholders the entry has no value for are left as ``%name%``.
    """
    fields = entry_fields(entry_id, slug, created_at, category_slug=category_slug, tz=tz)
    return render_format(fmt, fields)
