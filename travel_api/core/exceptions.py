"""Custom application exceptions."""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


class AppException(HTTPException):
    """Base application exception."""

    error_type = "SERVER"

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
        path: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.path = path
        self.errors = errors
        super().__init__(status_code=status_code, detail=detail, headers=headers)

    def to_errors(self) -> list[dict[str, Any]]:
        """Error entries for the failure envelope."""
        if self.errors:
            return self.errors
        return [{"type": self.error_type, "path": self.path, "message": self.detail}]


class ValidationError(AppException):
    """Validation error exception."""

    error_type = "VALIDATION"

    def __init__(
        self,
        detail: str = "Validation failed",
        errors: list[dict[str, Any]] | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST, detail=detail, path=path, errors=errors
        )


class NotFoundError(AppException):
    """Resource not found exception."""

    error_type = "NOT_FOUND"

    def __init__(self, resource: str = "Resource", identifier: str | None = None) -> None:
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} with ID '{identifier}' not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail, path="id")


class AuthenticationError(AppException):
    """Authentication failed exception."""

    error_type = "AUTHENTICATION"

    def __init__(self, detail: str = "Authentication failed") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
            path="authorization",
        )


class AuthorizationError(AppException):
    """Authorization denied exception."""

    error_type = "AUTHORIZATION"

    def __init__(self, detail: str = "You don't have permission to access this resource") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class DuplicateError(AppException):
    """Uniqueness violation exception."""

    error_type = "DUPLICATE"

    def __init__(self, resource: str, field: str, value: Any = None) -> None:
        detail = f"{resource} with this {field} already exists"
        if value is not None:
            detail = f"{resource} with {field} '{value}' already exists"
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail, path=field)


class ResourceNotAvailable(AppException):
    """Bookable resource not available exception."""

    error_type = "NOT_AVAILABLE"

    def __init__(self, detail: str = "This resource is not available for the selected dates") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ServerError(AppException):
    """Unexpected failure wrapped for the client."""

    error_type = "SERVER"

    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def handle_service_errors(
    message: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Re-raise application errors unchanged, wrap anything else as ServerError."""

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except AppException:
                raise
            except Exception as e:
                logger.exception(f"{message}: {e}")
                raise ServerError(message) from e

        return wrapper

    return decorator
