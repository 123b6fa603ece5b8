"""Permalink API endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from backend.api.deps import get_permalink_options, get_session
from backend.permalink.tokens import compile_format, placeholder_names
from backend.schemas.entry import EntryResponse, PermalinkConfigResponse
from backend.services.entry_service import to_entry_response
from backend.services.option_service import PermalinkConfig
from backend.services.permalink_service import correct_permalink, lookup_entry

logger = logging.getLogger(__name__)

PREFIX = "/api/permalinks"

router = APIRouter(prefix=PREFIX, tags=["permalinks"])


@router.get("", response_model=PermalinkConfigResponse)
async def permalink_config(
    config: Annotated[PermalinkConfig, Depends(get_permalink_options)],
) -> PermalinkConfigResponse:
    """Get the active permalink format."""
    return PermalinkConfigResponse(
        enabled=config.enabled,
        format=config.format,
        placeholders=placeholder_names(compile_format(config.format)),
    )


@router.get(
    "/{path:path}",
    response_model=EntryResponse,
    responses={301: {"description": "Redirect to the canonical permalink"}},
)
async def resolve_permalink(
    path: str,
    session: Annotated[AsyncSession, Depends(get_session)],
    config: Annotated[PermalinkConfig, Depends(get_permalink_options)],
) -> EntryResponse | RedirectResponse:
    """Resolve a permalink path to its entry.

    Short date components (``2024/3/...``) redirect to their canonical
    zero-padded form before any lookup happens.
    """
    if not config.enabled:
        raise HTTPException(status_code=404, detail="Custom permalinks are disabled")

    fix = correct_permalink(config.format, path)
    if fix.changed and fix.path is not None:
        target = f"{PREFIX}/{fix.path.lstrip('/')}"
        logger.info("Redirecting permalink %r to %r", path, target)
        return RedirectResponse(target, status_code=status.HTTP_301_MOVED_PERMANENTLY)

    lookup = await lookup_entry(session, config.format, path, tz=config.timezone)
    if lookup.entry is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return await to_entry_response(session, lookup.entry, config)
