"""Tests for the entry-by-id endpoint."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from backend.services.option_service import PERMALINK_ENABLED, set_option
from tests.conftest import make_entry

if TYPE_CHECKING:
    from httpx import AsyncClient
    from sqlalchemy.ext.asyncio import AsyncSession


@pytest.fixture
async def seeded(app_session: AsyncSession) -> AsyncSession:
    app_session.add_all(
        [
            make_entry("Hello", "hello", datetime(2024, 3, 1, 10, 0, tzinfo=UTC), entry_id=1),
            make_entry(
                "Draft",
                "draft",
                datetime(2024, 3, 2, 10, 0, tzinfo=UTC),
                is_draft=True,
                entry_id=2,
            ),
        ]
    )
    await app_session.commit()
    return app_session


class TestGetEntry:
    async def test_entry_with_permalink(self, client: AsyncClient, seeded: AsyncSession) -> None:
        resp = await client.get("/api/entries/1")
        assert resp.status_code == 200
        data = resp.json()
        assert data["title"] == "Hello"
        assert data["link"] == "/2024/03/01/hello"

    async def test_link_points_back_here_when_permalinks_disabled(
        self, client: AsyncClient, seeded: AsyncSession
    ) -> None:
        await set_option(seeded, PERMALINK_ENABLED, "false")
        await seeded.commit()

        resp = await client.get("/api/entries/1")
        link = resp.json()["link"]
        assert link == "/api/entries/1"

        again = await client.get(link)
        assert again.status_code == 200
        assert again.json()["id"] == 1

    async def test_draft_is_404(self, client: AsyncClient, seeded: AsyncSession) -> None:
        resp = await client.get("/api/entries/2")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Entry not found"

    async def test_missing_is_404(self, client: AsyncClient, seeded: AsyncSession) -> None:
        resp = await client.get("/api/entries/42")
        assert resp.status_code == 404

    @pytest.mark.parametrize("entry_id", ["abc", "0", "99999999999999999999999"])
    async def test_invalid_id_is_422(
        self, client: AsyncClient, seeded: AsyncSession, entry_id: str
    ) -> None:
        resp = await client.get(f"/api/entries/{entry_id}")
        assert resp.status_code == 422
