"""
event_catalog.api.app

FastAPI app factory for the Event Catalog service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Own the `Database` for the app's lifetime (create on startup, dispose on shutdown).
- Create and seed the `events` table outside prod.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from event_catalog import __version__
from event_catalog.api.routers.events import router as events_router
from event_catalog.api.routers.health import router as health_router
from event_catalog.db.init_db import init_db, seed_default_events
from event_catalog.db.session import Database
from event_catalog.observability.logging import configure_logging, get_logger
from event_catalog.observability.middleware import RequestContextMiddleware
from event_catalog.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, event_source=settings.event_source)
        database = Database(settings)
        app.state.database = database
        try:
            if settings.env in ("dev", "test") and settings.event_source == "model":
                # Prod schema and seed rows come from `alembic upgrade head`.
                await init_db(database.engine)
                inserted = await seed_default_events(database.sessionmaker)
                if inserted:
                    log.info("events_seeded", count=inserted)
            yield
        finally:
            await database.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Event Catalog",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(events_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Routers reach settings and the database only through `api.deps`, never via
# module globals, so several apps can coexist in one test process.
