"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from accounts.api.dependencies import get_session_manager
from accounts.schemas.auth import (
    AccessToken,
    MessageResponse,
    RefreshTokenRequest,
    TokenPair,
    UserLogin,
)
from accounts.services.sessions import SessionManager

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=TokenPair)
def login(
    credentials: UserLogin,
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
):
    """Login with email and password."""
    pair = sessions.login(credentials.email, credentials.password)
    return TokenPair(access_token=pair.access_token, refresh_token=pair.refresh_token)


@router.post("/logout", response_model=MessageResponse)
def logout(
    body: RefreshTokenRequest,
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
):
    """Invalidate a refresh token. Succeeds even if it was already gone."""
    sessions.logout(body.refresh_token)
    return MessageResponse(message="The user has been logged out successfully.")


@router.post("/token", response_model=AccessToken)
def refresh_access_token(
    body: RefreshTokenRequest,
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
):
    """Get a new access token for a stored refresh token."""
    return AccessToken(access_token=sessions.refresh(body.refresh_token))
