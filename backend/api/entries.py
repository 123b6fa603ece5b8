"""Entry API endpoints addressed by id."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from backend.api.deps import get_permalink_options, get_session
from backend.permalink.resolver import MAX_NUMERIC
from backend.schemas.entry import EntryResponse
from backend.services.entry_service import get_entry, to_entry_response
from backend.services.option_service import PermalinkConfig

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.get("/{entry_id}", response_model=EntryResponse)
async def get_entry_endpoint(
    entry_id: Annotated[int, Path(ge=1, le=MAX_NUMERIC)],
    session: Annotated[AsyncSession, Depends(get_session)],
    config: Annotated[PermalinkConfig, Depends(get_permalink_options)],
) -> EntryResponse:
    """Get a published entry by id; its ``link`` follows the permalink settings."""
    entry = await get_entry(session, entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return await to_entry_response(session, entry, config)
