"""
User error handling utilities.

Maps the closed set of service error kinds onto HTTP responses. Every
failure leaves as ``{"error": <label>, "message": <detail>}``; labels
are short category names and no traceback reaches the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from people.core.exceptions import (
    ErrorKind,
    NationalityNotFoundError,
    PeopleError,
)
from people.models.common import ErrorResponse

logger = logging.getLogger(__name__)

NOT_FOUND_LABEL = "Not found Error"
BAD_REQUEST_LABEL = "Bad Request"
SERVER_ERROR_LABEL = "Server Error"

_KIND_TO_STATUS: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, NOT_FOUND_LABEL),
    ErrorKind.INVALID_INPUT: (status.HTTP_400_BAD_REQUEST, BAD_REQUEST_LABEL),
    ErrorKind.ENRICHMENT: (status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_LABEL),
    ErrorKind.STORAGE: (status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_LABEL),
}


def error_response(status_code: int, label: str, message: str) -> JSONResponse:
    """Build the JSON error body shared by every endpoint."""
    body = ErrorResponse(error=label, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def status_for(exc: PeopleError) -> tuple[int, str]:
    """
    Resolve the HTTP status code and label for a service error.

    A nationality lookup that finds no country is reported as not found;
    every other enrichment failure is a server error.
    """
    if isinstance(exc, NationalityNotFoundError):
        return status.HTTP_404_NOT_FOUND, NOT_FOUND_LABEL
    return _KIND_TO_STATUS[exc.kind]


async def people_error_handler(request: Request, exc: PeopleError) -> JSONResponse:
    status_code, label = status_for(exc)
    log = logger.warning if status_code < 500 else logger.error
    log(
        "Request failed",
        extra={
            "path": request.url.path,
            "error_kind": exc.kind.value,
            "status_code": status_code,
            "error": str(exc),
        },
    )
    return error_response(status_code, label, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    parts = []
    for err in errors:
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    message = "; ".join(parts) or "Invalid request"
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error": message},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, BAD_REQUEST_LABEL, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        SERVER_ERROR_LABEL,
        "Internal server error",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(PeopleError, people_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
