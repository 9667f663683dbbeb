"""
Exception handlers.

Maps module exceptions to HTTP responses so routes never build error
responses themselves:

- NotFoundError        -> 404 {"error", "code"}
- UserValidationError  -> 400 [{"field", "message"}, ...]
- AuthenticationError  -> 401 {"error", "code"} + WWW-Authenticate
- ConflictError        -> 409
- anything else        -> 500 {"error": <message>}
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    RosterError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ConflictError,
)
from modules.users.exceptions import UserValidationError
from modules.users.models import Violation
from modules.users.validator import violations_from_errors

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: list[tuple[type[RosterError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def status_for(exc: RosterError) -> int:
    """Return the HTTP status for a module exception."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def violations_response(violations: list[Violation]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[v.model_dump() for v in violations],
    )


async def roster_error_handler(request: Request, exc: RosterError) -> JSONResponse:
    if isinstance(exc, UserValidationError):
        return violations_response(exc.violations)

    status_code = status_for(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    elif status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Unmapped error %s: %s", exc.code, exc.message)

    body = ErrorResponse(error=exc.message, code=exc.code)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report bad path parameters as field violations."""
    return violations_response(violations_from_errors(exc.errors()))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all exception handlers on the app."""
    app.add_exception_handler(RosterError, roster_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
