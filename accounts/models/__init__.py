"""SQLAlchemy models."""

from accounts.models.refresh_token import RefreshToken
from accounts.models.user import User

__all__ = [
    "User",
    "RefreshToken",
]
