from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "PENDING"          # Created from cart, the only state orders reach today
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
