"""Request context middleware for the catalog site.

Every request gets a correlation ID, echoed in ``X-Request-ID`` and
forwarded to the CMS, and its page locale. Both are bound into the
structlog context so log lines emitted while serving a page, such as CMS
fetch failures, can be traced back to the request.
"""

import time
from typing import Any, Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from andalus.api.schemas import ErrorResponse
from andalus.i18n import LocalizedRoute

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render an error in the ``ErrorResponse`` format.

    Args:
        request: Request being answered; supplies the request ID.
        status_code: HTTP status.
        error_code: Machine-readable error code.
        message: Human-readable message.
        details: Additional error context.
        headers: Extra response headers.

    Returns:
        JSON error response.
    """
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details or [],
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind request ID and locale to the request and its log lines.

    Unhandled exceptions are logged and answered with a 500
    ``INTERNAL_ERROR`` body carrying the request ID.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        locale = LocalizedRoute.parse(request.url.path).locale

        start_time = time.perf_counter()
        with structlog.contextvars.bound_contextvars(request_id=request_id, locale=locale):
            try:
                response = await call_next(request)
            except Exception as e:
                logger.exception(
                    "Unhandled exception",
                    path=request.url.path,
                    method=request.method,
                    error=str(e),
                )
                response = error_response(
                    request,
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    "INTERNAL_ERROR",
                    "An internal error occurred",
                )

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install the request context middleware.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(RequestContextMiddleware)
