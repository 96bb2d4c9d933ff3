"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from accounts.api.dependencies import get_token_claims, get_user_directory, require_superuser
from accounts.schemas.auth import MessageResponse
from accounts.schemas.user import UserCreate, UserPageResponse, UserResponse, UserUpdate
from accounts.services.tokens import TokenClaims
from accounts.services.users import UserDirectory

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    users: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Create a new user. Open to anonymous callers."""
    return users.create(
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        is_superuser=user_data.is_superuser,
    )


@router.get("", response_model=UserPageResponse)
def list_users(
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
    users: Annotated[UserDirectory, Depends(get_user_directory)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1)] = 10,
):
    """List users, one page at a time."""
    result = users.list_users(page=page, limit=limit)
    return UserPageResponse(
        data=[UserResponse.model_validate(user) for user in result.data],
        total=result.total,
        total_pages=result.total_pages,
        current_page=result.current_page,
        limit=result.limit,
    )


@router.put("/{user_id}", response_model=MessageResponse)
def update_user(
    user_id: int,
    user_data: UserUpdate,
    _claims: Annotated[TokenClaims, Depends(require_superuser)],
    users: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Update a user's name and/or email (superuser only)."""
    users.update(user_id, name=user_data.name, email=user_data.email)
    return MessageResponse(message="User updated successfully")


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    _claims: Annotated[TokenClaims, Depends(require_superuser)],
    users: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Delete a user and their refresh tokens (superuser only)."""
    users.delete(user_id)
    return MessageResponse(message="User deleted successfully")
