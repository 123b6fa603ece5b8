"""Permalink service: correction and entry lookup for incoming paths.

Both entry points are total: failures inside the engine come back as a
result carrying the failure kind instead of an exception, so the web layer
only has to choose between redirect, entry, and 404.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from backend.exceptions import EntryNotFoundError, NoMatchError, PermalinkError
from backend.permalink.canonical import CanonicalFix, fix_path
from backend.permalink.matcher import match
from backend.permalink.resolver import resolve
from backend.permalink.tokens import compile_format
from backend.services.category_service import find_category_id
from backend.services.entry_service import find_first

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from backend.exceptions import PermalinkErrorKind
    from backend.models.entry import Entry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PermalinkLookup:
    """Outcome of resolving a path to an entry."""

    entry: Entry | None = None
    error: PermalinkError | None = None

    @property
    def found(self) -> bool:
        return self.entry is not None

    @property
    def error_kind(self) -> PermalinkErrorKind | None:
        return self.error.kind if self.error is not None else None


def normalize_path(path: str) -> str:
    """Strip the leading slash the router leaves on request paths."""
    return path.removeprefix("/")


def correct_permalink(fmt: str, path: str) -> CanonicalFix:
    """Propose the canonical spelling of ``path`` (see ``fix_path``)."""
    fix = fix_path(fmt, normalize_path(path))
    if fix.error is not None:
        logger.debug("No permalink correction for %r: %s", path, fix.error)
    return fix


async def lookup_entry(
    session: AsyncSession, fmt: str, path: str, *, tz: str = "UTC"
) -> PermalinkLookup:
    """Resolve ``path`` under ``fmt`` to a single published entry."""
    path = normalize_path(path)
    captures = match(compile_format(fmt), path)
    if captures is None:
        return PermalinkLookup(error=NoMatchError(path))

    async def category_lookup(token: str) -> int | None:
        return await find_category_id(session, token)

    try:
        conditions = await resolve(captures, category_lookup, tz=tz)
        entry = await find_first(session, conditions)
    except PermalinkError as exc:
        logger.info("Permalink %r not resolvable: %s", path, exc)
        return PermalinkLookup(error=exc)
    except SQLAlchemyError as exc:
        logger.error("Entry lookup failed for permalink %r: %s", path, exc, exc_info=exc)
        return PermalinkLookup(error=EntryNotFoundError(path))

    if entry is None:
        logger.debug("No entry for permalink %r (%s)", path, conditions)
        return PermalinkLookup(error=EntryNotFoundError(path))
    return PermalinkLookup(entry=entry)
