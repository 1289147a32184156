"""
event_catalog.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables for local development and tests.
- Seed the built-in event names into an empty `events` table.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from event_catalog.catalog import DEFAULT_EVENT_NAMES
from event_catalog.db.models import Base
from event_catalog.db.repositories.events import EventRepo


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Prod gets the same table (and the same seed rows) from `alembic upgrade head`.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_default_events(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """
    Insert `DEFAULT_EVENT_NAMES` when the table is empty.

    Returns the number of rows inserted (0 when the table already had data).
    """

    async with session_factory() as session:
        repo = EventRepo(session)
        if await repo.count() > 0:
            return 0
        for name in DEFAULT_EVENT_NAMES:
            await repo.add(name=name)
        await session.commit()
        return len(DEFAULT_EVENT_NAMES)
