"""Pydantic schemas for API requests and responses."""

from accounts.schemas.auth import (
    AccessToken,
    MessageResponse,
    RefreshTokenRequest,
    TokenPair,
    UserLogin,
)
from accounts.schemas.user import UserCreate, UserPageResponse, UserResponse, UserUpdate

__all__ = [
    "UserLogin",
    "RefreshTokenRequest",
    "TokenPair",
    "AccessToken",
    "MessageResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserPageResponse",
]
