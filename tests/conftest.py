"""Shared test fixtures for Permalinker."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from backend.config import Settings
from backend.database import create_schema, make_session_factory
from backend.main import create_app, init_database
from backend.models.entry import Category, Entry

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

    from fastapi import FastAPI


def make_entry(
    title: str,
    slug: str | None,
    created_at: datetime,
    *,
    category_id: int | None = None,
    is_draft: bool = False,
    entry_id: int | None = None,
) -> Entry:
    """Build an Entry with UTC timestamps."""
    return Entry(
        id=entry_id,
        title=title,
        slug=slug,
        body="",
        category_id=category_id,
        is_draft=is_draft,
        created_at=created_at,
        updated_at=created_at,
    )


@asynccontextmanager
async def create_test_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create an HTTP test client for an app with its database initialized.

    Performs the database part of the application lifespan manually because
    ASGITransport does not trigger it.
    """
    await init_database(app)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    await app.state.engine.dispose()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Create test settings with a temporary database."""
    db_path = tmp_path / "test.db"
    return Settings(
        _env_file=None,
        debug=True,
        database_url=f"sqlite+aiosqlite:///{db_path}",
        permalink_enabled=True,
        permalink_format="%year%/%monthnum%/%day%/%postname%",
        timezone="UTC",
    )


@pytest.fixture
async def db_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with the schema in place."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(
    db_engine: AsyncEngine,
) -> AsyncGenerator[AsyncSession]:
    """Create a test database session."""
    session_factory: async_sessionmaker[AsyncSession] = make_session_factory(db_engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Session with two categories and a handful of entries.

    ids: 1 hello (news, 2024-03-01 10:00), 2 spring (2024-03-15 08:30),
    3 secret (draft, 2024-03-01 12:00), 4 no slug (tech, 2023-12-31 23:00).
    """
    db_session.add(Category(id=1, slug="news", title="News"))
    db_session.add(Category(id=2, slug="tech", title="Tech"))
    await db_session.flush()

    db_session.add_all(
        [
            make_entry(
                "Hello",
                "hello",
                datetime(2024, 3, 1, 10, 0, tzinfo=UTC),
                category_id=1,
                entry_id=1,
            ),
            make_entry("Spring", "spring", datetime(2024, 3, 15, 8, 30, tzinfo=UTC), entry_id=2),
            make_entry(
                "Secret",
                "secret",
                datetime(2024, 3, 1, 12, 0, tzinfo=UTC),
                is_draft=True,
                entry_id=3,
            ),
            make_entry(
                "Untitled",
                None,
                datetime(2023, 12, 31, 23, 0, tzinfo=UTC),
                category_id=2,
                entry_id=4,
            ),
        ]
    )
    await db_session.commit()
    return db_session


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create test HTTP client with the database initialized."""
    async with create_test_client(app) as ac:
        yield ac


@pytest.fixture
async def app_session(app: FastAPI, client: AsyncClient) -> AsyncGenerator[AsyncSession]:
    """Session bound to the app's own engine (requires the client fixture)."""
    async with app.state.session_factory() as session:
        yield session
