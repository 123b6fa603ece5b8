"""Health check endpoint."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.api.deps import get_session, get_settings
from backend.config import Settings
from backend.services.option_service import get_permalink_config

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

VERSION = "0.1.0"


class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
    permalinks: str
    permalink_format: str | None = None


@router.get("/api/health", response_model=HealthResponse)
async def health_check(
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Report whether the site options can be read and which permalink mode is active.

    Reading the options doubles as the database probe; when it fails the
    service is reported as degraded and the permalink mode as unknown.
    """
    try:
        config = await get_permalink_config(session, settings)
    except SQLAlchemyError:
        logger.warning("Health check could not read site options", exc_info=True)
        return HealthResponse(
            status="degraded", version=VERSION, database="error", permalinks="unknown"
        )

    return HealthResponse(
        status="ok",
        version=VERSION,
        database="ok",
        permalinks="enabled" if config.enabled else "disabled",
        permalink_format=config.format if config.enabled else None,
    )
