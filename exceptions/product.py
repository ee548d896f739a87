"""
Product-related exceptions.
"""

from .base import ShopException


class ProductException(ShopException):
    """Base exception for product-related errors."""
    pass


class ProductNotFoundException(ProductException):
    """Raised when product is not found in database."""

    def __init__(self, product_id: int | None = None):
        super().__init__(
            "Product not found",
            details={'product_id': product_id}
        )
        self.product_id = product_id
