"""Global error-handling middleware.

Catches application-specific exceptions and translates them into
structured JSON error responses with appropriate HTTP status codes.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from agentforge.utils.exceptions import (
    AgentForgeError,
    GenerationFailedError,
    InvalidRequestError,
    ProviderError,
    SkillStorageError,
    TemplateNotFoundError,
)
from agentforge.utils.logging import get_logger

logger = get_logger(__name__)

# Checked in order, so subclasses come before their parents.
_STATUS_MAP: tuple[tuple[type[AgentForgeError], int], ...] = (
    (InvalidRequestError, 400),
    (TemplateNotFoundError, 404),
    (GenerationFailedError, 502),
    (ProviderError, 502),
    (SkillStorageError, 500),
)


def status_for(exc: AgentForgeError) -> int:
    for exc_type, status_code in _STATUS_MAP:
        if isinstance(exc, exc_type):
            return status_code
    return 500


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware that wraps every request in a try/except and converts
    known exceptions to JSON error responses.

    Unknown exceptions are logged and returned as HTTP 500.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)

        except AgentForgeError as exc:
            status_code = status_for(exc)
            logger.warning(
                "handled_error",
                error_type=type(exc).__name__,
                status_code=status_code,
                detail=str(exc),
                path=request.url.path,
            )
            return JSONResponse(
                status_code=status_code,
                content={"error": type(exc).__name__, "detail": str(exc)},
            )

        except Exception as exc:
            logger.error(
                "unhandled_error",
                error_type=type(exc).__name__,
                detail=str(exc),
                path=request.url.path,
                exc_info=True,
            )
            return JSONResponse(
                status_code=500,
                content={
                    "error": "InternalServerError",
                    "detail": "An unexpected error occurred.  Please try again later.",
                },
            )
