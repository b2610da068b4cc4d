"""API dependencies for authentication and common query parameters."""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.config import settings
from travel_api.core.exceptions import AuthenticationError, AuthorizationError
from travel_api.core.security import verify_token
from travel_api.database import get_db

# Security scheme; missing credentials are reported through AuthenticationError
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identity carried by a verified access token."""

    id: UUID
    role: str = "user"
    email: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def _user_from_token(token: str) -> CurrentUser:
    payload = verify_token(token, token_type="access")
    try:
        user_id = UUID(str(payload["sub"]))
    except ValueError:
        raise AuthenticationError("Invalid token payload")
    return CurrentUser(id=user_id, role=payload.get("role", "user"), email=payload.get("email"))


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Get the current authenticated user from the JWT token."""
    if not credentials:
        raise AuthenticationError("Not authenticated")
    return _user_from_token(credentials.credentials)


async def get_current_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Get current user and verify they are an admin."""
    if not current_user.is_admin:
        raise AuthorizationError("Admin access required")
    return current_user


DbSession = Annotated[AsyncSession, Depends(get_db)]
AuthUser = Annotated[CurrentUser, Depends(get_current_user)]
AdminUser = Annotated[CurrentUser, Depends(get_current_admin)]

PageQuery = Annotated[int, Query(ge=1)]
LimitQuery = Annotated[int, Query(ge=1, le=settings.max_page_size)]

__all__ = [
    "AdminUser",
    "AuthUser",
    "CurrentUser",
    "DbSession",
    "LimitQuery",
    "PageQuery",
    "get_current_admin",
    "get_current_user",
    "get_db",
]
