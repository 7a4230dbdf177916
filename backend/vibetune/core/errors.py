"""
Error taxonomy for VibeTune.

Every failure a handler raises deliberately is one of the classes below.
``register_exception_handlers`` turns them into JSON bodies of the form
``{"error": <code>, "message": <text>}``.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class VibeTuneError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "internal_error"
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Any] = None):
        if message is not None:
            self.message = message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"error": self.error, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class Unauthenticated(VibeTuneError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "unauthorized"
    message = "Please authenticate"


class Forbidden(VibeTuneError):
    status_code = status.HTTP_403_FORBIDDEN
    error = "forbidden"
    message = "Access denied"


class Conflict(VibeTuneError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "conflict"
    message = "Resource already exists"


class InvalidCredentials(VibeTuneError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "invalid_credentials"
    message = "Invalid credentials"


class InvalidOperation(VibeTuneError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "invalid_operation"
    message = "Invalid updates"


class NotFound(VibeTuneError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"
    message = "Not found"


class InternalFailure(VibeTuneError):
    pass


async def _handle_vibetune_error(request: Request, exc: VibeTuneError) -> JSONResponse:
    headers = None
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(exc.to_dict()),
        headers=headers,
    )


async def _handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error = InvalidOperation(
        "Invalid request body",
        details=[
            {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in exc.errors()
        ],
    )
    return await _handle_vibetune_error(request, error)


async def _handle_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Unmatched routes and methods both read as a missing resource
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        error = NotFound()
    elif exc.status_code == status.HTTP_401_UNAUTHORIZED:
        error = Unauthenticated()
    elif exc.status_code == status.HTTP_403_FORBIDDEN:
        error = Forbidden()
    elif exc.status_code < 500:
        error = InvalidOperation(str(exc.detail))
    else:
        error = InternalFailure()
    return await _handle_vibetune_error(request, error)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return await _handle_vibetune_error(request, InternalFailure())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error-to-response mapping to an application."""
    app.add_exception_handler(VibeTuneError, _handle_vibetune_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
