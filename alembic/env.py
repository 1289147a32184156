"""
alembic.env

Alembic migration environment for the `events` schema.

Responsibilities:
- Point autogenerate at `event_catalog.db.models.Base.metadata`.
- Run migrations through the service's own async engine (same URL, same driver).

Notes:
- This module is executed by Alembic, not imported by the FastAPI runtime.
- The URL comes from `EVENTS_DATABASE_URL` via `Settings`, like the app.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from event_catalog.db.models import Base
from event_catalog.db.session import Database
from event_catalog.settings import Settings

config = context.config

if config.config_file_name is not None:
    # Leave already-configured loggers (structlog's stdlib ones) enabled.
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _settings() -> Settings:
    # An explicit URL (e.g. `Config.set_main_option`) wins over the environment.
    url = config.get_main_option("sqlalchemy.url")
    return Settings(database_url=url) if url else Settings()


def run_migrations_offline() -> None:
    # Emit SQL without connecting; `render_as_batch` keeps SQLite ALTERs valid.
    context.configure(
        url=_settings().database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        render_as_batch=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    database = Database(_settings())
    try:
        async with database.engine.connect() as conn:
            await conn.run_sync(_run_sync)
            await conn.commit()
    finally:
        await database.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())


# --- Module Notes -----------------------------------------------------------
# `asyncio.run` means `alembic upgrade` must be invoked outside a running loop
# (CLI, or a plain sync test fixture).
