from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, Integer, DateTime, ForeignKey, Numeric, CheckConstraint, Index
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import relationship

from enums.order_status import OrderStatus
from models.base import Base, DTO
from models.orderItem import OrderItemDTO


class Order(Base):
    __tablename__ = 'orders'

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    status = Column(SQLEnum(OrderStatus), nullable=False, default=OrderStatus.PENDING)
    # Sum of order_items.price * quantity at creation time
    total = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    # Relations
    user = relationship('User')
    items = relationship('OrderItem', back_populates='order', cascade='all, delete-orphan', order_by='OrderItem.id')

    __table_args__ = (
        CheckConstraint('total > 0', name='check_order_total_positive'),
        Index('ix_orders_user_created', 'user_id', 'created_at'),
    )


class OrderDTO(DTO):
    id: int | None = None
    user_id: int | None = None
    status: OrderStatus | None = None
    total: Decimal | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[OrderItemDTO] = []
