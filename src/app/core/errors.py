"""
Application Errors

Error taxonomy shared by every module, and the FastAPI exception handlers
that turn those errors into the JSON envelope::

    {"message": "...", "error": "...", "code": "..."}

``error`` is an optional human-readable detail; ``code`` is a stable
machine-readable identifier.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base exception for errors rendered as a JSON envelope."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 400,
        error: str | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.error = error
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        payload = {"message": self.message, "code": self.error_code}
        if self.error:
            payload["error"] = self.error
        return payload


class ValidationError(AppError):
    """Raised when request input is malformed."""

    def __init__(self, message: str = "Validation failed", error: str | None = None):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            error=error,
        )


class DuplicateUserError(AppError):
    """Raised when registering an email that is already taken."""

    def __init__(self):
        super().__init__(
            message="User already exists with this email",
            error_code="DUPLICATE_USER",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class InvalidCredentialsError(AppError):
    """
    Raised when login fails.

    Used for both unknown emails and wrong passwords so the response does
    not reveal which accounts exist.
    """

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            error_code="INVALID_CREDENTIALS",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class MissingTokenError(AppError):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self):
        super().__init__(
            message="Access token required",
            error_code="MISSING_TOKEN",
            status_code=status.HTTP_401_UNAUTHORIZED,
            error="Authorization header with Bearer token is required",
        )


class UserGoneError(AppError):
    """Raised when a valid token references a user that no longer exists."""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            error_code="USER_GONE",
            status_code=status.HTTP_401_UNAUTHORIZED,
            error="User associated with token no longer exists",
        )


class TokenExpiredError(AppError):
    """Raised when the presented token has expired."""

    def __init__(self):
        super().__init__(
            message="Token expired",
            error_code="TOKEN_EXPIRED",
            status_code=status.HTTP_403_FORBIDDEN,
            error="Please login again",
        )


class InvalidTokenError(AppError):
    """Raised when the presented token is malformed or fails verification."""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            error_code="INVALID_TOKEN",
            status_code=status.HTTP_403_FORBIDDEN,
            error="Token is malformed or invalid",
        )


class NotFoundError(AppError):
    """Raised when a domain resource does not exist."""

    def __init__(self, resource: str = "Resource"):
        super().__init__(
            message=f"{resource} not found",
            error_code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
        )


class InternalError(AppError):
    """Raised for unexpected failures (database errors, bugs)."""

    def __init__(self, message: str = "Internal server error", error: str | None = None):
        super().__init__(
            message=message,
            error_code="INTERNAL_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=error,
        )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts)


async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error = ValidationError(error=_format_validation_errors(exc))
    logger.info(f"Validation failed for {request.method} {request.url.path}: {error.error}")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        f"Database error during {request.method} {request.url.path}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    error = InternalError(error="Database operation failed")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error during {request.method} {request.url.path}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON envelope handlers on an application."""
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
