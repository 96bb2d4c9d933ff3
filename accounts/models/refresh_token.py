"""Refresh token model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from accounts.database import Base
from accounts.models.mixins import TimestampMixin


class RefreshToken(Base, TimestampMixin):
    """Server-side record of an issued refresh token.

    A refresh JWT is only honoured while a row holding its exact value exists
    and ``expires_at`` has not passed. Rows are removed on logout or when the
    owning user is deleted; expired rows are left in place.
    """

    __tablename__ = "refresh_tokens"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    token = Column(String(512), unique=True, nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    user = relationship("User", back_populates="refresh_tokens")
