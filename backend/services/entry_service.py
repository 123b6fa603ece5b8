"""Entry store: the single lookup behind a permalink."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select

from backend.models.entry import Entry
from backend.permalink.links import build_entry_path
from backend.schemas.entry import EntryResponse
from backend.services.category_service import get_category_slug
from backend.services.datetime_service import format_iso, to_utc

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from backend.permalink.resolver import ConditionSpec
    from backend.services.option_service import PermalinkConfig

logger = logging.getLogger(__name__)


async def find_first(session: AsyncSession, conditions: ConditionSpec) -> Entry | None:
    """Return the first published entry matching ``conditions``.

    An id or slug selects the entry on its own; otherwise the creation-time
    range and category narrow the search.  Empty conditions match nothing.
    """
    if conditions.is_empty:
        return None

    stmt = select(Entry).where(Entry.is_draft.is_(False))
    if conditions.has_identity:
        if conditions.entry_id is not None:
            stmt = stmt.where(Entry.id == conditions.entry_id)
        if conditions.slug is not None:
            stmt = stmt.where(Entry.slug == conditions.slug)
    else:
        if conditions.time_range is not None:
            stmt = stmt.where(
                Entry.created_at >= to_utc(conditions.time_range.start),
                Entry.created_at < to_utc(conditions.time_range.end),
            )
        if conditions.category_id is not None:
            stmt = stmt.where(Entry.category_id == conditions.category_id)

    stmt = stmt.order_by(Entry.id.asc()).limit(1)
    result = await session.execute(stmt)
    return result.scalars().first()


async def get_entry(session: AsyncSession, entry_id: int) -> Entry | None:
    """Get a published entry by id."""
    stmt = select(Entry).where(Entry.id == entry_id, Entry.is_draft.is_(False))
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def entry_link(session: AsyncSession, entry: Entry, config: PermalinkConfig) -> str:
    """Public path of ``entry`` under the active permalink settings."""
    if not config.enabled:
        return f"/api/entries/{entry.id}"
    category_slug = await get_category_slug(session, entry.category_id)
    path = build_entry_path(
        config.format,
        entry.id,
        entry.slug,
        entry.created_at,
        category_slug=category_slug,
        tz=config.timezone,
    )
    return "/" + path.lstrip("/")


async def to_entry_response(
    session: AsyncSession, entry: Entry, config: PermalinkConfig
) -> EntryResponse:
    return EntryResponse(
        id=entry.id,
        title=entry.title,
        slug=entry.slug,
        category_id=entry.category_id,
        created_at=format_iso(entry.created_at),
        link=await entry_link(session, entry, config),
    )
