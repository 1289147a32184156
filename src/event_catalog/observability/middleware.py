"""
event_catalog.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Accept or generate a request id and echo it back as `x-request-id`.
- Bind request metadata into structlog contextvars.
- Emit one `request_completed` line per request (uvicorn's access log is off).
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from event_catalog.observability.logging import get_logger

REQUEST_ID_HEADER = "x-request-id"

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Reuses the caller's request id, or mints a UUID4
    - Binds request_id/path/method for every log line of the request
    - Logs status and duration once the response is ready
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
            log.info(
                "request_completed",
                status=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        finally:
            # Context must not leak into the next request handled on this task.
            structlog.contextvars.clear_contextvars()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# Pairs with `observability.logging.configure_logging`: every log line emitted
# while serving a request carries request_id/path/method.
