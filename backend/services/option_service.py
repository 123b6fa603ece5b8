"""Site options: permalink settings read from the options table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import select

from backend.models.option import Option

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from backend.config import Settings

logger = logging.getLogger(__name__)

PERMALINK_ENABLED = "permalink_enabled"
PERMALINK_FORMAT = "permalink_format"


@dataclass(frozen=True)
class PermalinkConfig:
    enabled: bool
    format: str
    timezone: str


async def get_options(session: AsyncSession, *names: str) -> dict[str, str]:
    """Fetch the named options that exist."""
    stmt = select(Option.name, Option.value).where(Option.name.in_(names))
    result = await session.execute(stmt)
    return {row[0]: row[1] for row in result.all()}


async def set_option(session: AsyncSession, name: str, value: str) -> None:
    """Insert or update a single option (caller commits)."""
    option = await session.get(Option, name)
    if option is None:
        session.add(Option(name=name, value=value))
    else:
        option.value = value
    await session.flush()


async def get_permalink_config(session: AsyncSession, settings: Settings) -> PermalinkConfig:
    """Read permalink options, falling back to application settings."""
    options = await get_options(session, PERMALINK_ENABLED, PERMALINK_FORMAT)

    enabled = settings.permalink_enabled
    raw_enabled = options.get(PERMALINK_ENABLED)
    if raw_enabled is not None:
        enabled = raw_enabled.strip().lower() == "true"

    fmt = options.get(PERMALINK_FORMAT) or settings.permalink_format
    if not fmt.strip():
        logger.warning("Empty permalink format option; using default %r", settings.permalink_format)
        fmt = settings.permalink_format

    return PermalinkConfig(enabled=enabled, format=fmt, timezone=settings.timezone)
