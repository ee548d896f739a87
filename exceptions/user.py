"""
User-related exceptions.
"""

from .base import ShopException


class UserException(ShopException):
    """Base exception for user-related errors."""
    pass


class UserNotFoundException(UserException):
    """Raised when user is not found in database."""

    def __init__(self, user_id: int | None = None):
        if user_id:
            message = f"User with ID {user_id} not found"
            details = {'user_id': user_id}
        else:
            message = "User not found"
            details = {}

        super().__init__(message, details)
        self.user_id = user_id


class UserAlreadyExistsException(UserException):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists",
            details={'email': email}
        )
        self.email = email


class UserAlreadySellerException(UserException):
    """Raised when a seller asks to become a seller again."""

    def __init__(self, user_id: int):
        super().__init__(
            "User is already a seller",
            details={'user_id': user_id}
        )
        self.user_id = user_id
