from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Boolean, Numeric, CheckConstraint, Index, func, select
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import relationship, column_property

from enums.gender import Gender
from enums.product_sort_field import ProductSortField
from enums.sort_order import SortOrder
from models.base import Base, DTO
from models.category import Category, CategoryDTO


class Product(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    # No CHECK on stock: the only guard against overselling is the pre-check in OrderService
    stock = Column(Integer, nullable=False, default=0)
    # Sellers upload base64 data URLs, so this can get large
    image_url = Column(Text, nullable=True)
    brand = Column(String, nullable=True)
    gender = Column(SQLEnum(Gender), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    category_id = Column(Integer, ForeignKey('categories.id'), nullable=False)
    seller_id = Column(Integer, ForeignKey('users.id'), nullable=True)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    # Relationships
    category = relationship('Category', back_populates='products')
    seller = relationship('User')
    reviews = relationship('Review', back_populates='product', order_by='Review.created_at.desc()')

    __table_args__ = (
        CheckConstraint('price > 0', name='check_product_price_positive'),
        Index('ix_products_category_id', 'category_id'),
        Index('ix_products_seller_id', 'seller_id'),
    )


# Loaded together with every Category row, used by the category tree and detail views
Category.product_count = column_property(
    select(func.count(Product.id))
    .where(Product.category_id == Category.id)
    .correlate_except(Product)
    .scalar_subquery()
)


class ProductDTO(DTO):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    stock: int | None = None
    image_url: str | None = None
    brand: str | None = None
    gender: Gender | None = None
    is_active: bool | None = None
    is_featured: bool | None = None
    category_id: int | None = None
    seller_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    review_count: int = 0
    average_rating: float | None = None
    category: CategoryDTO | None = None


class ProductFilterDTO(DTO):
    """Listing criteria; unset fields do not filter. Only active products are ever listed."""
    category_id: int | None = None
    search: str | None = None
    gender: Gender | None = None
    brand: str | None = None
    is_featured: bool | None = None
    seller_id: int | None = None
    sort_by: ProductSortField = ProductSortField.CREATED_AT
    order: SortOrder = SortOrder.DESC
    page: int = 1
    limit: int = 10


class ProductPageDTO(DTO):
    products: list[ProductDTO] = []
    page: int = 1
    limit: int = 10
    total: int = 0
    pages: int = 0


# Lives here rather than in models/category.py because it embeds ProductDTO
class CategoryDetailDTO(CategoryDTO):
    parent: CategoryDTO | None = None
    children: list[CategoryDTO] = []
    product_count: int = 0
    products: list[ProductDTO] = []
