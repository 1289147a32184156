"""
event_catalog.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the app-owned `Settings` and `Database` to endpoints.
- Pick the `EventSource` that backs the listing endpoint.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from event_catalog.catalog import EventSource, ModelEventSource, StaticEventSource
from event_catalog.db.session import Database
from event_catalog.services.events_index import EventsIndexService
from event_catalog.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Set by `create_app`; tests inject their own Settings through the factory.
    return request.app.state.settings  # type: ignore[attr-defined]


def database_dep(request: Request) -> Database:
    # Created in the lifespan handler of `event_catalog.api.app.create_app`.
    return request.app.state.database  # type: ignore[attr-defined]


async def db_session(database: Database = Depends(database_dep)) -> AsyncIterator[AsyncSession]:
    async with database.sessionmaker() as session:
        yield session


def event_source(
    settings: Settings = Depends(settings_dep),
    session: AsyncSession = Depends(db_session),
) -> EventSource:
    if settings.event_source == "model":
        return ModelEventSource(session)
    return StaticEventSource()


def events_index_service(
    settings: Settings = Depends(settings_dep),
    source: EventSource = Depends(event_source),
) -> EventsIndexService:
    return EventsIndexService(source=source, include_timestamp=settings.timestamp_enabled)


# --- Module Notes -----------------------------------------------------------
# The session is opened lazily by SQLAlchemy; the static source never touches it.
