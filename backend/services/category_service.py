"""Category lookup for permalink resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from backend.exceptions import InvalidCaptureError
from backend.models.entry import Category
from backend.permalink.resolver import parse_numeric

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


async def find_category_id(session: AsyncSession, token: str) -> int | None:
    """Resolve a category slug, or a numeric category id, to its id."""
    stmt = select(Category.id).where(Category.slug == token)
    category_id = (await session.execute(stmt)).scalar_one_or_none()
    if category_id is not None:
        return category_id
    try:
        numeric_id = parse_numeric("category", token)
    except InvalidCaptureError:
        return None
    category = await session.get(Category, numeric_id)
    return category.id if category is not None else None


async def get_category_slug(session: AsyncSession, category_id: int | None) -> str | None:
    if category_id is None:
        return None
    category = await session.get(Category, category_id)
    return category.slug if category is not None else None
