"""
Models Package

This file ensures all SQLAlchemy models are imported and registered,
which is required for relationships to work correctly.
"""

from models.base import Base
from models.user import User
from models.category import Category
from models.product import Product
from models.review import Review
from models.cartItem import CartItem
from models.wishlistItem import WishlistItem
from models.orderItem import OrderItem
from models.order import Order
