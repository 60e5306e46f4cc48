"""
Exception handlers that render every failure as a JSON error envelope.

Endpoints raise HTTPException with a status code and message; these handlers
turn it into {"success": false, "message": ..., "timestamp": ...}.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from optahire.core.responses import utc_timestamp
from optahire.core.validation import describe_error

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "timestamp": utc_timestamp(),
        },
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed request bodies are bad requests like any other validation failure.

    The message describes the first offending field, e.g. "Skills must contain at least 1 item."
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = [part for part in first.get("loc", ()) if part != "body"]
        if location and isinstance(location[0], str):
            label = location[0].replace("_", " ").capitalize()
        else:
            label = "Request body"
        message = describe_error(first, label)
    else:
        message = "Invalid request body"

    logger.warning(f"{request.method} {request.url.path} rejected: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
