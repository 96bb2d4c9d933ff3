"""JWT issuance and verification for access and refresh tokens."""

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from accounts.config import get_settings
from accounts.exceptions import InvalidSignature, TokenExpired

settings = get_settings()

CLAIMS_VERSION = 1
ACCESS_TOKEN_TYPE = "access"  # noqa: S105
REFRESH_TOKEN_TYPE = "refresh"  # noqa: S105


def utcnow() -> datetime:
    """Current time in UTC, truncated to whole seconds like JWT timestamps."""
    return datetime.now(UTC).replace(microsecond=0)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from stores without tz support."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@dataclass
class TokenClaims:
    """Decoded token payload, claims schema version 1."""

    user_id: int
    is_superuser: bool
    token_type: str
    issued_at: datetime
    expires_at: datetime
    token_id: str
    version: int = CLAIMS_VERSION

    def to_payload(self) -> dict:
        return {
            "ver": self.version,
            "type": self.token_type,
            "sub": str(self.user_id),
            "is_superuser": self.is_superuser,
            "iat": self.issued_at,
            "exp": self.expires_at,
            "jti": self.token_id,
        }

    @classmethod
    def from_payload(cls, payload: dict) -> "TokenClaims":
        return cls(
            user_id=int(payload["sub"]),
            is_superuser=bool(payload["is_superuser"]),
            token_type=str(payload["type"]),
            issued_at=datetime.fromtimestamp(int(payload["iat"]), UTC),
            expires_at=datetime.fromtimestamp(int(payload["exp"]), UTC),
            token_id=str(payload["jti"]),
            version=int(payload["ver"]),
        )


@dataclass
class IssuedToken:
    """An encoded token together with the expiry baked into it."""

    token: str
    expires_at: datetime


def _issue(
    user_id: int,
    is_superuser: bool,
    token_type: str,
    secret: str,
    lifetime: timedelta,
    now: datetime | None = None,
) -> IssuedToken:
    issued_at = ensure_utc(now).replace(microsecond=0) if now else utcnow()
    claims = TokenClaims(
        user_id=user_id,
        is_superuser=bool(is_superuser),
        token_type=token_type,
        issued_at=issued_at,
        expires_at=issued_at + lifetime,
        token_id=uuid.uuid4().hex,
    )
    encoded = jwt.encode(claims.to_payload(), secret, algorithm=settings.jwt_algorithm)
    return IssuedToken(token=encoded, expires_at=claims.expires_at)


def create_access_token(
    user_id: int, is_superuser: bool, now: datetime | None = None
) -> IssuedToken:
    """Create a short-lived access token signed with the access secret."""
    return _issue(
        user_id,
        is_superuser,
        ACCESS_TOKEN_TYPE,
        settings.access_token_secret,
        timedelta(minutes=settings.access_token_expire_minutes),
        now,
    )


def create_refresh_token(
    user_id: int, is_superuser: bool, now: datetime | None = None
) -> IssuedToken:
    """Create a refresh token signed with the refresh secret."""
    return _issue(
        user_id,
        is_superuser,
        REFRESH_TOKEN_TYPE,
        settings.refresh_token_secret,
        timedelta(minutes=settings.refresh_token_expire_minutes),
        now,
    )


def decode_token(token: str, secret: str, expected_type: str) -> TokenClaims:
    """Verify signature and expiry, then parse the claims.

    Raises TokenExpired when ``exp`` has passed and InvalidSignature for every
    other failure, including a token of the wrong type or claims version.
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as e:
        raise TokenExpired("Token expired") from e
    except JWTError as e:
        raise InvalidSignature() from e

    try:
        claims = TokenClaims.from_payload(payload)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidSignature() from e

    if claims.version != CLAIMS_VERSION or claims.token_type != expected_type:
        raise InvalidSignature()
    return claims


def decode_access_token(token: str) -> TokenClaims:
    """Decode an access token presented as a bearer credential."""
    return decode_token(token, settings.access_token_secret, ACCESS_TOKEN_TYPE)


def decode_refresh_token(token: str) -> TokenClaims:
    """Decode a refresh token presented to the token endpoint."""
    return decode_token(token, settings.refresh_token_secret, REFRESH_TOKEN_TYPE)
