"""Entry and permalink schemas."""

from __future__ import annotations

from pydantic import BaseModel


class EntryResponse(BaseModel):
    """An entry resolved from its permalink."""

    id: int
    title: str
    slug: str | None = None
    category_id: int | None = None
    created_at: str
    link: str


class PermalinkConfigResponse(BaseModel):
    """Active permalink settings."""

    enabled: bool
    format: str
    placeholders: list[str]
