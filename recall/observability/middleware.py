"""
Request observability middleware.

CorrelationMiddleware binds a correlation id for each request and echoes it
back; RequestLoggingMiddleware logs one line per request with its timing.

Dependencies: fastapi, starlette
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from recall.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Health checks are logged at DEBUG only
QUIET_PATH_SUFFIXES = ("/health",)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        method, path = request.method, request.url.path
        level = logging.DEBUG if path.endswith(QUIET_PATH_SUFFIXES) else logging.INFO

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - unhandled {type(e).__name__}",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                },
            )
            raise

        logger.log(
            level,
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "content_length": request.headers.get("content-length"),
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind the caller's X-Correlation-ID, or a fresh one, for the request."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
