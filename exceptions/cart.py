"""
Cart-related exceptions.
"""

from .base import ShopException


class CartException(ShopException):
    """Base exception for cart-related errors."""
    pass


class EmptyCartException(CartException):
    """Raised when trying to checkout with empty cart."""

    def __init__(self, user_id: int):
        super().__init__(
            "Cart is empty",
            details={'user_id': user_id}
        )
        self.user_id = user_id


class CartItemNotFoundException(CartException):
    """Raised when cart item not found (or owned by another user)."""

    def __init__(self, cart_item_id: int):
        super().__init__(
            "Cart item not found",
            details={'cart_item_id': cart_item_id}
        )
        self.cart_item_id = cart_item_id
