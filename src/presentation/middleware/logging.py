"""Request/response logging middleware with timing."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.core.metrics import record_http_request

logger = structlog.get_logger(__name__)


def _endpoint_label(request: Request) -> str:
    """Route template when matched, so metric labels stay bounded."""
    route = request.scope.get("route")
    return getattr(route, "path", "unmatched")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion, and duration, and records metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        query = str(request.query_params) if request.query_params else None

        log = logger.bind(method=method, path=path)

        log.info("request_started", query=query)

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time

            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            record_http_request(method, _endpoint_label(request), 500, duration)
            raise

        duration = time.perf_counter() - start_time

        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        record_http_request(method, _endpoint_label(request), response.status_code, duration)

        return response
