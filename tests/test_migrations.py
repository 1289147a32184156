"""
tests.test_migrations

The prod schema path: `alembic upgrade head` creates and seeds `events`, after
which a prod app with the model source serves the listing.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config

from event_catalog.catalog import DEFAULT_EVENT_NAMES
from event_catalog.db.repositories.events import EventRepo
from event_catalog.db.session import Database

ROOT = Path(__file__).resolve().parent.parent


def _alembic_config(database_url: str) -> Config:
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg


async def _upgrade(database_url: str, revision: str = "head") -> None:
    # env.py calls asyncio.run, which cannot nest inside the test's loop.
    await asyncio.to_thread(command.upgrade, _alembic_config(database_url), revision)


@pytest.mark.asyncio
async def test_upgrade_creates_and_seeds_events(database_url, make_settings) -> None:
    await _upgrade(database_url)

    database = Database(make_settings())
    try:
        async with database.sessionmaker() as session:
            events = await EventRepo(session).all()
    finally:
        await database.dispose()

    assert [e.name for e in events] == list(DEFAULT_EVENT_NAMES)
    assert [e.position for e in events] == [0, 1, 2, 3]


@pytest.mark.asyncio
async def test_prod_model_listing_after_upgrade(database_url, app_factory, client_for) -> None:
    await _upgrade(database_url)

    app = await app_factory(env="prod", event_source="model")
    async with client_for(app) as client:
        r = await client.get("/readyz")
        assert r.status_code == 200

        r = await client.get("/events")
    assert r.status_code == 200
    assert r.json() == {"events": list(DEFAULT_EVENT_NAMES), "time": None}


@pytest.mark.asyncio
async def test_repo_appends_after_migrated_seed(database_url, make_settings) -> None:
    await _upgrade(database_url)

    database = Database(make_settings())
    try:
        async with database.sessionmaker() as session:
            repo = EventRepo(session)
            added = await repo.add(name="Code Retreat")
            await session.commit()
            names = [e.name for e in await repo.all()]
    finally:
        await database.dispose()

    assert added.position == len(DEFAULT_EVENT_NAMES)
    assert names == [*DEFAULT_EVENT_NAMES, "Code Retreat"]
