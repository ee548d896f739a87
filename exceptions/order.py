"""
Order-related exceptions.
"""

from .base import ShopException


class OrderException(ShopException):
    """Base exception for order-related errors."""
    pass


class OrderNotFoundException(OrderException):
    """Raised when order is not found in database (or belongs to another user)."""

    def __init__(self, order_id: int):
        super().__init__(
            "Order not found",
            details={'order_id': order_id}
        )
        self.order_id = order_id


class InsufficientStockException(OrderException):
    """Raised when a requested quantity exceeds the product's stock."""

    def __init__(self, product_id: int, product_name: str | None, requested: int, available: int):
        if product_name:
            message = f"Insufficient stock for {product_name}"
        else:
            message = "Insufficient stock"
        super().__init__(
            message,
            details={'product_id': product_id, 'requested': requested, 'available': available}
        )
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
