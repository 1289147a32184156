"""
event_catalog.db.session

Engine and session factory owned by the running app.

Responsibilities:
- Build one async engine + sessionmaker from settings.
- Answer readiness for the configured event source.
- Release pooled connections on shutdown.
"""

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from event_catalog.settings import Settings

# Touches the table the model source reads, not just the connection.
_EVENTS_PROBE = text("SELECT 1 FROM events LIMIT 1")


class Database:
    """
    One per app instance, stored on `app.state.database`.

    Construction is cheap: SQLAlchemy does not connect until the first query,
    so a static-source deployment never opens the database file.
    """

    def __init__(self, settings: Settings) -> None:
        self.url = settings.database_url
        self.engine = create_async_engine(
            settings.database_url,
            pool_pre_ping=True,
            echo=settings.log_level.upper() == "DEBUG",
        )
        # Loaded rows stay readable after commit.
        self.sessionmaker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
            autoflush=False,
        )

    async def check_events_table(self) -> None:
        """Raise the driver error if `events` is missing or unreachable."""

        async with self.engine.connect() as conn:
            await conn.execute(_EVENTS_PROBE)

    async def dispose(self) -> None:
        await self.engine.dispose()


# --- Module Notes -----------------------------------------------------------
# Request-scoped sessions come from `api.deps.db_session`, which opens them from
# `Database.sessionmaker`.
