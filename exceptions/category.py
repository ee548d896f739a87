"""
Category-related exceptions.
"""

from .base import ShopException


class CategoryException(ShopException):
    """Base exception for category-related errors."""
    pass


class CategoryNotFoundException(CategoryException):
    """Raised when category is not found in database."""

    def __init__(self, category_id: int | None = None):
        super().__init__(
            "Category not found",
            details={'category_id': category_id}
        )
        self.category_id = category_id


class CategoryAlreadyExistsException(CategoryException):
    """Raised when a category with the same name or slug already exists."""

    def __init__(self, name: str, slug: str):
        super().__init__(
            "Category with this name or slug already exists",
            details={'name': name, 'slug': slug}
        )
        self.name = name
        self.slug = slug
