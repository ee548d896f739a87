"""
Wishlist-related exceptions.
"""

from .base import ShopException


class WishlistException(ShopException):
    """Base exception for wishlist-related errors."""
    pass


class WishlistItemAlreadyExistsException(WishlistException):
    """Raised when a product is added to a wishlist twice."""

    def __init__(self, user_id: int, product_id: int):
        super().__init__(
            "Product already in wishlist",
            details={'user_id': user_id, 'product_id': product_id}
        )
        self.user_id = user_id
        self.product_id = product_id


class WishlistItemNotFoundException(WishlistException):
    """Raised when removing a product that is not on the wishlist."""

    def __init__(self, user_id: int, product_id: int):
        super().__init__(
            "Item not found in wishlist",
            details={'user_id': user_id, 'product_id': product_id}
        )
        self.user_id = user_id
        self.product_id = product_id
