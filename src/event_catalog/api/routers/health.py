"""
event_catalog.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) scoped to what the configured event
  source needs.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from event_catalog.api.deps import database_dep, settings_dep
from event_catalog.db.session import Database
from event_catalog.observability.logging import get_logger
from event_catalog.settings import Settings

router = APIRouter()
log = get_logger(__name__)


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness only: no dependency is consulted.
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(
    settings: Settings = Depends(settings_dep),
    database: Database = Depends(database_dep),
) -> dict[str, str]:
    # The static source serves from memory, so there is nothing to wait for.
    if settings.event_source == "static":
        return {"status": "ready", "source": "static"}

    # Model source: the `events` table must exist, not merely the connection.
    try:
        await database.check_events_table()
    except SQLAlchemyError as e:
        log.warning("readiness_failed", error=str(e))
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="events table unavailable"
        ) from e
    return {"status": "ready", "source": "model"}


# --- Module Notes -----------------------------------------------------------
# A prod deployment with `EVENTS_EVENT_SOURCE=model` stays unready until
# `alembic upgrade head` has created and seeded `events`.
