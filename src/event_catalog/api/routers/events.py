"""
event_catalog.api.routers.events

Read-only event listing.

Responsibilities:
- `GET /events`: return the ordered event names and, when enabled, the time the
  listing was produced.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from event_catalog.api.deps import events_index_service
from event_catalog.services.events_index import EventsIndex, EventsIndexService

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=EventsIndex)
async def list_events(
    service: EventsIndexService = Depends(events_index_service),
) -> EventsIndex:
    return await service.index()


# --- Module Notes -----------------------------------------------------------
# The router stays thin; source selection lives in `api.deps`, the action in
# `services.events_index`.
