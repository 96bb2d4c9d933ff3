"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for payloads exchanged with camelCase keys (``refreshToken``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("password")
    @classmethod
    def strip_password(cls, value: str) -> str:
        # Signup trims passwords before hashing
        return value.strip()


class RefreshTokenRequest(CamelModel):
    """Body for the token and logout endpoints."""

    refresh_token: str | None = None


class TokenPair(CamelModel):
    """Login response."""

    access_token: str
    refresh_token: str


class AccessToken(CamelModel):
    """Token refresh response."""

    access_token: str


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
