"""
Request payload models.

Responses reuse the DTOs from models/; these classes only describe what
clients may send. Field names are camelCase on the wire (see DTO).
"""

from decimal import Decimal

from pydantic import EmailStr, Field, field_validator

from enums.gender import Gender
from models.base import DTO


def _upper(value):
    return value.upper() if isinstance(value, str) else value


class RegisterRequest(DTO):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str | None = Field(default=None, max_length=255)


class LoginRequest(DTO):
    email: EmailStr
    password: str = Field(min_length=1)


class CreateProductRequest(DTO):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    stock: int = Field(default=0, ge=0)
    image_url: str | None = None
    brand: str | None = None
    gender: Gender | None = None
    is_featured: bool = False
    category_id: int
    seller_id: int | None = None

    @field_validator('gender', mode='before')
    @classmethod
    def gender_upper(cls, value):
        return _upper(value)


class UpdateProductRequest(DTO):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    stock: int | None = Field(default=None, ge=0)
    image_url: str | None = None
    category_id: int | None = None
    is_active: bool | None = None
    is_featured: bool | None = None
    brand: str | None = None
    gender: Gender | None = None

    @field_validator('gender', mode='before')
    @classmethod
    def gender_upper(cls, value):
        return _upper(value)


class CreateCategoryRequest(DTO):
    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    description: str | None = None
    image_url: str | None = None
    gender: Gender | None = None
    parent_id: int | None = None


class AddToCartRequest(DTO):
    product_id: int
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequest(DTO):
    quantity: int = Field(ge=1)


class AddToWishlistRequest(DTO):
    product_id: int
