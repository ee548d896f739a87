"""
Authentication and authorization exceptions.
"""

from .base import ShopException


class AuthException(ShopException):
    """Base exception for authentication/authorization errors."""
    pass


class MissingTokenException(AuthException):
    """Raised when a protected endpoint is called without a bearer token."""

    def __init__(self):
        super().__init__("No token, authorization denied")


class InvalidTokenException(AuthException):
    """Raised when the bearer token cannot be decoded, is expired or names an unknown user."""

    def __init__(self, reason: str | None = None):
        super().__init__(
            "Token is not valid",
            details={'reason': reason} if reason else None
        )
        self.reason = reason


class InvalidCredentialsException(AuthException):
    """Raised when login email/password do not match."""

    def __init__(self):
        super().__init__("Invalid credentials")


class PermissionDeniedException(AuthException):
    """Raised when the user's role does not allow the operation."""

    def __init__(self, message: str, user_id: int | None = None, role: str | None = None):
        super().__init__(
            message,
            details={'user_id': user_id, 'role': role}
        )
        self.user_id = user_id
        self.role = role
