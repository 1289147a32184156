"""
event_catalog.api.__main__

Entrypoint for `python -m event_catalog.api` and the `event-catalog` script.

Responsibilities:
- Load settings from `EVENTS_*` environment variables.
- Serve the app with uvicorn, leaving request logging to our middleware.
"""

from __future__ import annotations

import uvicorn

from event_catalog.api.app import create_app
from event_catalog.observability.logging import get_logger
from event_catalog.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)
    log.info("serving", host=settings.api_host, port=settings.api_port)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # keep uvicorn from replacing our handlers
        access_log=False,  # `request_completed` from RequestContextMiddleware instead
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# In prod with the model source, run `alembic upgrade head` before starting.
