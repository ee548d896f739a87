from decimal import Decimal

from sqlalchemy import Column, Integer, ForeignKey, Numeric, CheckConstraint, Index
from sqlalchemy.orm import relationship

from models.base import Base, DTO
from models.product import ProductDTO


class OrderItem(Base):
    __tablename__ = 'order_items'

    __table_args__ = (
        # Check constraints for data integrity
        CheckConstraint('price > 0', name='ck_order_item_positive_price'),
        CheckConstraint('quantity > 0', name='ck_order_item_positive_quantity'),

        # Indexes for performance
        Index('ix_order_items_order_id', 'order_id'),
        Index('ix_order_items_product_id', 'product_id'),
    )

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey('orders.id', ondelete='CASCADE'), nullable=False)
    product_id = Column(Integer, ForeignKey('products.id'), nullable=False)
    quantity = Column(Integer, nullable=False)
    # Unit price snapshot, decoupled from later product price changes
    price = Column(Numeric(10, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")
    product = relationship("Product")


class OrderItemDTO(DTO):
    id: int | None = None
    order_id: int | None = None
    product_id: int | None = None
    quantity: int | None = None
    price: Decimal | None = None
    product: ProductDTO | None = None
