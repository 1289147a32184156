"""
event_catalog.services.events_index

The "list events" action.

Responsibilities:
- Read event names from the configured `EventSource`.
- Stamp the listing with the current UTC time when timestamps are enabled.
- Return an `EventsIndex` view model for the API layer to render.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from event_catalog.catalog import EventSource
from event_catalog.observability.logging import get_logger


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


class EventsIndex(BaseModel):
    events: list[str] = Field(default_factory=list)
    time: datetime | None = None


class EventsIndexService:
    def __init__(
        self,
        *,
        source: EventSource,
        include_timestamp: bool,
        now: Callable[[], datetime] = utcnow,
    ) -> None:
        self._source = source
        self._include_timestamp = include_timestamp
        self._now = now
        self._log = get_logger(__name__).bind(source=source.name)

    async def index(self) -> EventsIndex:
        events = await self._source.list_names()
        time = self._now() if self._include_timestamp else None
        self._log.info("events_index", count=len(events))
        return EventsIndex(events=events, time=time)


# --- Module Notes -----------------------------------------------------------
# The logger is bound per instance (one service per request), so the `source`
# field is always the one that produced the names.
