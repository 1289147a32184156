"""
tests.test_event_repo

Persistence tests for `EventRepo` and the seeding helper.
"""

from __future__ import annotations

import pytest

from event_catalog.catalog import DEFAULT_EVENT_NAMES
from event_catalog.db.init_db import seed_default_events
from event_catalog.db.repositories.events import EventRepo


@pytest.mark.asyncio
async def test_add_appends_in_order(session) -> None:
    repo = EventRepo(session)
    for name in ("Zeta", "Alpha", "Mid"):
        await repo.add(name=name)
    await session.commit()

    events = await repo.all()
    assert [e.name for e in events] == ["Zeta", "Alpha", "Mid"]
    assert [e.position for e in events] == [0, 1, 2]


@pytest.mark.asyncio
async def test_empty_table(session) -> None:
    repo = EventRepo(session)
    assert await repo.count() == 0
    assert await repo.all() == []


@pytest.mark.asyncio
async def test_seed_is_idempotent(session_factory, session) -> None:
    assert await seed_default_events(session_factory) == len(DEFAULT_EVENT_NAMES)
    assert await seed_default_events(session_factory) == 0

    names = [e.name for e in await EventRepo(session).all()]
    assert names == list(DEFAULT_EVENT_NAMES)


@pytest.mark.asyncio
async def test_seed_skips_non_empty_table(session_factory, session) -> None:
    repo = EventRepo(session)
    await repo.add(name="Custom")
    await session.commit()

    assert await seed_default_events(session_factory) == 0
    assert [e.name for e in await repo.all()] == ["Custom"]
