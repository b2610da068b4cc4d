"""Core utilities and security modules."""

from travel_api.core.exceptions import (
    AppException,
    AuthenticationError,
    AuthorizationError,
    DuplicateError,
    NotFoundError,
    ResourceNotAvailable,
    ServerError,
    ValidationError,
    handle_service_errors,
)
from travel_api.core.security import create_access_token, create_user_token, verify_token

__all__ = [
    "AppException",
    "AuthenticationError",
    "AuthorizationError",
    "DuplicateError",
    "NotFoundError",
    "ResourceNotAvailable",
    "ServerError",
    "ValidationError",
    "handle_service_errors",
    "create_access_token",
    "create_user_token",
    "verify_token",
]
