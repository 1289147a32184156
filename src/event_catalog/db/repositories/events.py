"""
event_catalog.db.repositories.events

Repository for `Event` entities.

Responsibilities:
- Read all events in display order (the model-level "all events" call).
- Append new events at the end of the ordering.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from event_catalog.db.models import Event


class EventRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def all(self) -> list[Event]:
        stmt = select(Event).order_by(Event.position, Event.created_at)
        return list((await self._session.execute(stmt)).scalars().all())

    async def count(self) -> int:
        stmt = select(func.count()).select_from(Event)
        return (await self._session.execute(stmt)).scalar_one()

    async def add(self, *, name: str) -> Event:
        # Next position is max + 1; an empty table starts at 0.
        stmt = select(func.max(Event.position))
        last = (await self._session.execute(stmt)).scalar_one_or_none()
        ev = Event(name=name, position=0 if last is None else last + 1)
        self._session.add(ev)
        await self._session.flush()
        return ev


# --- Module Notes -----------------------------------------------------------
# Commit is left to the caller (seeding helper or service layer).
