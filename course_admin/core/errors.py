"""Error taxonomy and exception handler registration."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
import logging
from typing import Any

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from course_admin.core.config import get_settings
from course_admin.schemas.envelope import ErrorResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Named failure kinds and the HTTP status each one maps to."""

    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class APIError(Exception):
    """Base application exception for explicit API error responses."""

    def __init__(
        self,
        *,
        kind: ErrorKind,
        message: str,
        errors: Sequence[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.errors = list(errors) if errors else None

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class UnauthorizedError(APIError):
    """Missing or rejected credential, unknown principal, or insufficient role."""

    def __init__(self, *, message: str = "Authentication required") -> None:
        super().__init__(kind=ErrorKind.UNAUTHORIZED, message=message)


class BadRequestError(APIError):
    """Malformed or incomplete input."""

    def __init__(self, *, message: str, field: str | None = None) -> None:
        errors = [f"{field}: {message}"] if field else None
        super().__init__(kind=ErrorKind.BAD_REQUEST, message=message, errors=errors)


class NotFoundError(APIError):
    """Convenience exception for missing resources."""

    def __init__(self, *, message: str = "Resource not found") -> None:
        super().__init__(kind=ErrorKind.NOT_FOUND, message=message)


class ConflictError(APIError):
    """Operation blocked by the current state of related rows."""

    def __init__(self, *, message: str) -> None:
        super().__init__(kind=ErrorKind.CONFLICT, message=message)


def build_error_response(
    *,
    status_code: int,
    message: str,
    errors: Sequence[str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(message=message, errors=list(errors) if errors else None)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


def _kind_for_status(status_code: int) -> ErrorKind:
    for kind, kind_status in _STATUS_BY_KIND.items():
        if kind_status == status_code:
            return kind
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return ErrorKind.INTERNAL
    return ErrorKind.BAD_REQUEST


def _validation_errors(exc: RequestValidationError) -> list[str]:
    errors: list[str] = []
    for issue in exc.errors():
        field = _format_location(issue.get("loc", ()))
        if issue.get("type") == "missing" or (issue.get("type") == "string_too_short" and issue.get("input") == ""):
            errors.append(f"{field} is required")
        else:
            errors.append(f"{field}: {issue.get('msg', 'Invalid value')}")
    return errors


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)

    prefixes = {"body", "query", "path", "header", "cookie"}
    filtered = [str(part) for part in location if part not in prefixes]
    if filtered:
        return ".".join(filtered)

    if not location:
        return "request"

    return str(location[0])


async def request_validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as field-specific bad requests."""

    errors = _validation_errors(exc)
    message = errors[0] if len(errors) == 1 else "Request validation failed"
    return build_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        message=message,
        errors=errors,
    )


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap routing-level HTTP exceptions in the shared envelope."""

    kind = _kind_for_status(exc.status_code)
    message = str(exc.detail) if isinstance(exc.detail, str) and exc.detail else kind.value
    return build_error_response(status_code=exc.status_code, message=message)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Return explicit domain errors in the shared envelope."""

    if exc.kind is ErrorKind.INTERNAL:
        logger.error("request failed method=%s path=%s message=%s", request.method, request.url.path, exc.message)
    return build_error_response(
        status_code=exc.status_code,
        message=exc.message,
        errors=exc.errors,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map unexpected failures to an internal error, with detail outside production."""

    logger.exception("Unhandled error method=%s path=%s", request.method, request.url.path)
    errors = None if get_settings().is_production else [f"{type(exc).__name__}: {exc}"]
    return build_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="Internal server error",
        errors=errors,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to a FastAPI app instance."""

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
