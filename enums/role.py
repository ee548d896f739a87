from enum import Enum


class Role(str, Enum):
    """
    Access tier of a user account.

    USER: can browse, manage own cart/wishlist and place orders
    SELLER: additionally creates products (recorded as their seller)
    ADMIN: manages categories and any product
    """
    USER = "USER"
    SELLER = "SELLER"
    ADMIN = "ADMIN"
