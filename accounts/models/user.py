"""User model."""

from sqlalchemy import Boolean, Column, Integer, String, false
from sqlalchemy.orm import relationship

from accounts.database import Base
from accounts.models.mixins import TimestampMixin


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup."""
    return (email or "").strip().lower()


class User(Base, TimestampMixin):
    """User account used for authentication and administration."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column("password", String(255), nullable=False)
    is_superuser = Column(Boolean, nullable=False, default=False, server_default=false())

    # Relationships
    refresh_tokens = relationship(
        "RefreshToken", back_populates="user", cascade="all, delete-orphan"
    )
