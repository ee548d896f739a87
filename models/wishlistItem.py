from datetime import datetime

from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from models.base import Base, DTO
from models.product import ProductDTO


class WishlistItem(Base):
    __tablename__ = "wishlist_items"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    product_id = Column(Integer, ForeignKey('products.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime, default=datetime.now)

    # Relationships
    product = relationship('Product')

    __table_args__ = (
        UniqueConstraint('user_id', 'product_id', name='uq_wishlist_items_user_product'),
    )


class WishlistItemDTO(DTO):
    id: int | None = None
    user_id: int | None = None
    product_id: int | None = None
    created_at: datetime | None = None
    product: ProductDTO | None = None
