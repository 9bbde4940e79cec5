"""Application errors and their mapping onto HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from roster_backend.api.models import ErrorResponse

_PARAMETER_LOCATIONS = frozenset({"path", "query"})
HTTP_422_UNPROCESSABLE = 422


class AppError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    """Raised when the requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self) -> None:
        super().__init__("Resource not found")


class ValidationError(AppError):
    """Raised when a payload fails semantic validation."""

    status_code = status.HTTP_400_BAD_REQUEST


class InternalError(AppError):
    """Raised when the service cannot complete a request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"error": ...}`` envelope shared by every failure."""
    payload = ErrorResponse(error=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render framework validation failures with the shared envelope.

    Malformed path or query parameters and bodies that are not valid JSON are
    client errors (400); well-formed JSON that does not fit the request model
    is unprocessable (422).
    """
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = first.get("loc", ("body",))
    field_path = ".".join(
        str(part) for part in location[1:] if not isinstance(part, int)
    )
    message = first.get("msg", "Invalid request")
    if field_path:
        message = f"{field_path}: {message}"

    if first.get("type") == "json_invalid" or location[0] in _PARAMETER_LOCATIONS:
        return error_response(status.HTTP_400_BAD_REQUEST, message)
    return error_response(HTTP_422_UNPROCESSABLE, message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to *app*."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


__all__ = [
    "AppError",
    "InternalError",
    "NotFoundError",
    "ValidationError",
    "error_response",
    "register_error_handlers",
]
