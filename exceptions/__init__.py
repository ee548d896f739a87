"""
Custom exceptions for the shop backend.

This module provides a hierarchy of custom exceptions for consistent error handling
throughout the application.

Exception Hierarchy:
--------------------
ShopException (base)
├── AuthException
│   ├── MissingTokenException
│   ├── InvalidTokenException
│   ├── InvalidCredentialsException
│   └── PermissionDeniedException
├── UserException
│   ├── UserNotFoundException
│   ├── UserAlreadyExistsException
│   └── UserAlreadySellerException
├── ProductException
│   └── ProductNotFoundException
├── CategoryException
│   ├── CategoryNotFoundException
│   └── CategoryAlreadyExistsException
├── CartException
│   ├── EmptyCartException
│   └── CartItemNotFoundException
├── WishlistException
│   ├── WishlistItemAlreadyExistsException
│   └── WishlistItemNotFoundException
└── OrderException
    ├── OrderNotFoundException
    └── InsufficientStockException

Usage:
------
Services raise specific exceptions:
    raise OrderNotFoundException(order_id=123)

The web layer turns them into JSON error responses:
    {"error": "Order not found"}  (HTTP 404)
"""

from .base import ShopException
from .auth import (
    AuthException,
    MissingTokenException,
    InvalidTokenException,
    InvalidCredentialsException,
    PermissionDeniedException
)
from .user import UserException, UserNotFoundException, UserAlreadyExistsException, UserAlreadySellerException
from .product import ProductException, ProductNotFoundException
from .category import CategoryException, CategoryNotFoundException, CategoryAlreadyExistsException
from .cart import CartException, EmptyCartException, CartItemNotFoundException
from .wishlist import WishlistException, WishlistItemAlreadyExistsException, WishlistItemNotFoundException
from .order import OrderException, OrderNotFoundException, InsufficientStockException

__all__ = [
    'ShopException',
    'AuthException',
    'MissingTokenException',
    'InvalidTokenException',
    'InvalidCredentialsException',
    'PermissionDeniedException',
    'UserException',
    'UserNotFoundException',
    'UserAlreadyExistsException',
    'UserAlreadySellerException',
    'ProductException',
    'ProductNotFoundException',
    'CategoryException',
    'CategoryNotFoundException',
    'CategoryAlreadyExistsException',
    'CartException',
    'EmptyCartException',
    'CartItemNotFoundException',
    'WishlistException',
    'WishlistItemAlreadyExistsException',
    'WishlistItemNotFoundException',
    'OrderException',
    'OrderNotFoundException',
    'InsufficientStockException',
]
