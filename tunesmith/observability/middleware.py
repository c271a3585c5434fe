"""
HTTP middleware for request tracing.

CorrelationMiddleware scopes a correlation ID to each request (reusing the
caller's ``X-Correlation-ID`` when sent). RequestLoggingMiddleware logs one
line per request and flags webhook acknowledgments that come close to the
provider's 15 second retry deadline.

Dependencies: starlette, tunesmith.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from tunesmith.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Provider retries callbacks that are not answered within 15s.
SLOW_CALLBACK_ACK_SECONDS = 5.0


def _is_callback_path(path: str) -> bool:
    return path.rstrip("/").endswith("-callback")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and latency of every request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        path = request.url.path
        context = {"method": request.method, "path": path}

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled error while serving request",
                extra={**context, "elapsed_ms": _elapsed_ms(started), "error_type": type(e).__name__},
            )
            raise

        elapsed_ms = _elapsed_ms(started)
        logger.info(
            f"{request.method} {path} -> {response.status_code}",
            extra={**context, "status_code": response.status_code, "elapsed_ms": elapsed_ms},
        )
        if _is_callback_path(path) and elapsed_ms > SLOW_CALLBACK_ACK_SECONDS * 1000:
            logger.warning(
                "Slow webhook acknowledgment; provider may redeliver",
                extra={**context, "elapsed_ms": elapsed_ms},
            )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Binds a correlation ID for the duration of a request and echoes it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
