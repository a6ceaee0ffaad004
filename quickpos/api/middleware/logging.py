"""
Per-request log context and timing.

The request id (and the terminal id, when the till sends X-Terminal-ID)
is bound into structlog contextvars, so every event emitted while the
request is served carries them without passing loggers around.
"""

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from quickpos.config import bind_terminal, get_logger

logger = get_logger(__name__)

TERMINAL_HEADER = "X-Terminal-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs how it ended."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        if terminal_id := request.headers.get(TERMINAL_HEADER):
            bind_terminal(terminal_id)

        started = time.perf_counter()
        logger.debug("request_started", client=getattr(request.client, "host", None))

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("request_failed", error=str(e), duration_ms=_elapsed_ms(started))
            raise

        duration_ms = _elapsed_ms(started)
        logger.info("request_completed", status=response.status_code, duration_ms=duration_ms)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        return response
