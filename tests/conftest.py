"""
tests.conftest

Shared fixtures: a file-backed SQLite database per test and an in-process
HTTP client that runs the app lifespan.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import AsyncExitStack
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from event_catalog.api.app import create_app
from event_catalog.db.init_db import init_db
from event_catalog.db.session import Database
from event_catalog.settings import Settings


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'events.db'}"


@pytest.fixture
def make_settings(database_url: str) -> Callable[..., Settings]:
    def _make(**overrides) -> Settings:
        return Settings(**{"env": "test", "database_url": database_url, **overrides})

    return _make


@pytest_asyncio.fixture
async def database(make_settings) -> AsyncIterator[Database]:
    db = Database(make_settings())
    await init_db(db.engine)
    yield db
    await db.dispose()


@pytest.fixture
def session_factory(database: Database) -> async_sessionmaker[AsyncSession]:
    return database.sessionmaker


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as s:
        yield s


@pytest.fixture
def client_for() -> Callable[[FastAPI], httpx.AsyncClient]:
    def _client(app: FastAPI) -> httpx.AsyncClient:
        transport = httpx.ASGITransport(app=app)
        return httpx.AsyncClient(transport=transport, base_url="http://test")

    return _client


@pytest_asyncio.fixture
async def app_factory(make_settings) -> AsyncIterator[Callable[..., Awaitable[FastAPI]]]:
    """
    Build an app with the given settings overrides and run its lifespan.

    httpx's ASGITransport does not drive lifespan events, so the lifespan
    context is entered here and closed at teardown.
    """

    async with AsyncExitStack() as stack:

        async def _build(**overrides) -> FastAPI:
            app = create_app(settings=make_settings(**overrides))
            await stack.enter_async_context(app.router.lifespan_context(app))
            return app

        yield _build
