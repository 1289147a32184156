"""
event_catalog.catalog

Event-name sources for the listing endpoint.

Responsibilities:
- Hold the built-in ordered list of event names.
- Provide interchangeable sources: a fixed literal and the persisted model.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from event_catalog.db.repositories.events import EventRepo

DEFAULT_EVENT_NAMES: tuple[str, ...] = (
    "BugSmash",
    "Hackathon",
    "Kata Camp",
    "Rails User Group",
)


class EventSource(Protocol):
    name: str

    async def list_names(self) -> list[str]: ...


class StaticEventSource:
    name = "static"

    def __init__(self, names: Sequence[str] = DEFAULT_EVENT_NAMES) -> None:
        self._names = tuple(names)

    async def list_names(self) -> list[str]:
        # New list per call; callers may mutate it freely.
        return list(self._names)


class ModelEventSource:
    name = "model"

    def __init__(self, session: AsyncSession) -> None:
        self._repo = EventRepo(session)

    async def list_names(self) -> list[str]:
        return [e.name for e in await self._repo.all()]


# --- Module Notes -----------------------------------------------------------
# `DEFAULT_EVENT_NAMES` also seeds the `events` table (see `db.init_db`), so both
# sources agree on a fresh database.
