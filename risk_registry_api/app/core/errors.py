"""
Uniform error responses.

Every failure leaves the service as a JSON object with a single
``error`` field and the matching status code, and is logged at error
level together with that status code.  Endpoint code only has to raise
``fastapi.HTTPException``; the handlers registered here take care of
the response body.  Routing errors produced by the framework itself
(unknown path, wrong method) go through the same handler.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(
    request: Request, message: str, status_code: int, headers: Optional[dict] = None
) -> JSONResponse:
    """Log ``message`` and build the ``{"error": message}`` response."""
    logger.error(
        message,
        extra={"status_code": status_code, "method": request.method, "path": request.url.path},
    )
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(request, str(exc.detail), exc.status_code, exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Request rejected by the framework: %s", exc.errors())
    return error_response(request, "invalid request", status.HTTP_400_BAD_REQUEST)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error while serving request",
        exc_info=exc,
        extra={
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "method": request.method,
            "path": request.url.path,
        },
    )
    return JSONResponse(
        {"error": "internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register the error handlers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
