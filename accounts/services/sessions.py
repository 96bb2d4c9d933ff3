"""Session lifecycle: login, access-token refresh and logout."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from accounts.exceptions import (
    InvalidCredentials,
    MissingToken,
    TokenExpired,
    TokenNotFound,
    UserNotFound,
)
from accounts.models.refresh_token import RefreshToken
from accounts.models.user import User, normalize_email
from accounts.services.passwords import dummy_verify, verify_password
from accounts.services.tokens import (
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
    ensure_utc,
    utcnow,
)

logger = logging.getLogger(__name__)


@dataclass
class TokenPair:
    """Tokens handed out on a successful login."""

    access_token: str
    refresh_token: str


class SessionManager:
    """Issues and validates sessions backed by stored refresh tokens.

    Refresh token states:
        active   -> row stored and ``expires_at`` in the future
        expired  -> row stored but ``expires_at`` has passed (rejected, not purged)
        revoked  -> row deleted by logout or by deleting the user

    Access tokens are never stored. The superuser flag inside one is a snapshot
    taken at issuance, so a demotion only takes effect once the holder's access
    token expires.
    """

    def __init__(self, db: Session):
        self.db = db

    def login(self, email: str, password: str) -> TokenPair:
        """Verify credentials and open a new session.

        Unknown email and wrong password fail identically.
        """
        user = self.db.query(User).filter(User.email == normalize_email(email)).first()
        if user is None:
            dummy_verify()
            logger.info("Login rejected: unknown email")
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            logger.info(f"Login rejected: bad password for user {user.id}")
            raise InvalidCredentials()

        access = create_access_token(user.id, user.is_superuser)
        refresh = create_refresh_token(user.id, user.is_superuser)

        # expires_at mirrors the exp claim baked into the refresh JWT
        self.db.add(
            RefreshToken(user_id=user.id, token=refresh.token, expires_at=refresh.expires_at)
        )
        self.db.commit()

        logger.info(f"User {user.id} logged in")
        return TokenPair(access_token=access.token, refresh_token=refresh.token)

    def refresh(self, refresh_token: str | None) -> str:
        """Exchange a stored, unexpired refresh token for a new access token.

        The refresh token itself is neither rotated nor extended.
        """
        if not refresh_token:
            raise MissingToken()

        record = self.db.query(RefreshToken).filter(RefreshToken.token == refresh_token).first()
        if record is None:
            logger.info("Refresh rejected: token not found")
            raise TokenNotFound()

        # Stored expiry and the signed exp claim are both checked
        if utcnow() > ensure_utc(record.expires_at):
            logger.info(f"Refresh rejected: stored token {record.id} expired")
            raise TokenExpired()

        claims = decode_refresh_token(refresh_token)

        # Privilege is re-read; the old token's claim may be stale
        user = self.db.query(User).filter(User.id == claims.user_id).first()
        if user is None:
            logger.info(f"Refresh rejected: user {claims.user_id} no longer exists")
            raise UserNotFound()

        access = create_access_token(user.id, user.is_superuser)
        logger.debug(f"Issued refreshed access token for user {user.id}")
        return access.token

    def logout(self, refresh_token: str | None) -> int:
        """Delete the stored refresh token. Returns the number of rows removed."""
        if not refresh_token:
            return 0
        deleted = (
            self.db.query(RefreshToken)
            .filter(RefreshToken.token == refresh_token)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        logger.info(f"Logout removed {deleted} refresh token(s)")
        return deleted
