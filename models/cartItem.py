from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship

from models.base import Base, DTO
from models.product import ProductDTO


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    product_id = Column(Integer, ForeignKey('products.id', ondelete='CASCADE'), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, default=datetime.now)

    # Relationships
    product = relationship('Product')

    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
        UniqueConstraint('user_id', 'product_id', name='uq_cart_items_user_product'),
    )


class CartItemDTO(DTO):
    id: int | None = None
    user_id: int | None = None
    product_id: int | None = None
    quantity: int | None = None
    created_at: datetime | None = None
    product: ProductDTO | None = None


class CartSummaryDTO(DTO):
    items: list[CartItemDTO] = []
    total: Decimal = Decimal("0.00")
    item_count: int = 0
