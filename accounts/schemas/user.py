"""User schemas."""

import html

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from accounts.models.user import normalize_email
from accounts.schemas.auth import CamelModel


def clean_name(value: str) -> str:
    """Trim and HTML-escape a free-text name."""
    value = html.escape(value.strip(), quote=True)
    if not value:
        raise ValueError("name must not be blank")
    return value


class UserCreate(BaseModel):
    """Create a new user."""

    name: str = Field(..., max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=128)
    is_superuser: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return clean_name(value)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("password must not be blank")
        return value


class UserUpdate(BaseModel):
    """Update a user. Only supplied fields change."""

    name: str | None = Field(None, max_length=255)
    email: EmailStr | None = Field(None, max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        return clean_name(value) if value is not None else None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        return normalize_email(value) if value is not None else None


class UserResponse(BaseModel):
    """Public user fields. The password hash is never exposed."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    is_superuser: bool


class UserPageResponse(CamelModel):
    """Paginated user listing."""

    data: list[UserResponse]
    total: int
    total_pages: int
    current_page: int
    limit: int
