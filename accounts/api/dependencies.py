"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from accounts.database import get_db
from accounts.exceptions import AuthenticationError, AuthorizationError, Forbidden
from accounts.services.sessions import SessionManager
from accounts.services.tokens import TokenClaims, decode_access_token
from accounts.services.users import UserDirectory

security = HTTPBearer(auto_error=False)


def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Validate the bearer access token. No store lookup is made."""
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    try:
        return decode_access_token(credentials.credentials)
    except AuthorizationError as e:
        raise AuthenticationError() from e


def require_superuser(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> TokenClaims:
    """Allow only tokens issued to a superuser.

    The flag comes from the token, so it can lag behind the stored value until
    the token expires.
    """
    if not claims.is_superuser:
        raise Forbidden()
    return claims


def get_session_manager(
    db: Annotated[Session, Depends(get_db)],
) -> SessionManager:
    """Get session manager bound to the request's session."""
    return SessionManager(db)


def get_user_directory(
    db: Annotated[Session, Depends(get_db)],
) -> UserDirectory:
    """Get user directory bound to the request's session."""
    return UserDirectory(db)
