"""Domain errors raised by the account and session services.

Each error carries the HTTP status it maps to and a short, client-safe
message. The API layer turns them into ``{"message": ...}`` responses.
"""

from fastapi import status


class AccountsError(Exception):
    """Base class for all service errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(AccountsError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid input"


class AuthenticationError(AccountsError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid authentication credentials"


class InvalidCredentials(AuthenticationError):
    message = "Incorrect email or password"


class MissingToken(AuthenticationError):
    message = "Refresh token is required"


class AuthorizationError(AccountsError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Not authorized"


class TokenNotFound(AuthorizationError):
    message = "Refresh token not found"


class TokenExpired(AuthorizationError):
    message = "Refresh token expired"


class InvalidSignature(AuthorizationError):
    message = "Invalid token"


class Forbidden(AuthorizationError):
    message = "This action requires superuser privileges."


class NotFoundError(AccountsError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"


class UserNotFound(NotFoundError):
    message = "User not found"


class ConflictError(AccountsError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class DuplicateEmail(ConflictError):
    message = "Email already registered"
