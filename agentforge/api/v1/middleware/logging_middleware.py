"""Request / response logging middleware using structlog.

Logs each request with method, path, status code, and timing.
"""

from __future__ import annotations

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from agentforge.utils.logging import get_logger

logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs every HTTP request with timing and response status."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        method = request.method
        path = request.url.path
        request_id = request.headers.get("x-request-id", "")

        logger.info("request_started", method=method, path=path, request_id=request_id)

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "request_failed",
                method=method,
                path=path,
                elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
                request_id=request_id,
            )
            raise

        status_code = response.status_code
        log_fn = logger.info if status_code < 400 else logger.warning
        log_fn(
            "request_completed",
            method=method,
            path=path,
            status_code=status_code,
            elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
            request_id=request_id,
        )
        return response
