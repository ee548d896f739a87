from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, selectinload

from db import session_execute, session_flush
from enums.order_status import OrderStatus
from models.order import Order, OrderDTO
from models.orderItem import OrderItem
from models.product import Product


def _with_items(stmt):
    return stmt.options(
        selectinload(Order.items).selectinload(OrderItem.product).selectinload(Product.category)
    )


class OrderRepository:
    @staticmethod
    async def create(user_id: int, total: Decimal, session: AsyncSession | Session) -> int:
        order = Order(user_id=user_id, total=total, status=OrderStatus.PENDING)
        session.add(order)
        await session_flush(session)
        return order.id

    @staticmethod
    async def get_by_id(order_id: int, user_id: int, session: AsyncSession | Session) -> OrderDTO | None:
        """Order with items and products, only if it belongs to user_id."""
        stmt = _with_items(select(Order).where(Order.id == order_id, Order.user_id == user_id))
        order = await session_execute(stmt.execution_options(populate_existing=True), session)
        order = order.scalar()
        if order is None:
            return None
        return OrderDTO.model_validate(order, from_attributes=True)

    @staticmethod
    async def get_by_user_id(user_id: int, session: AsyncSession | Session) -> list[OrderDTO]:
        stmt = _with_items(select(Order)
                           .where(Order.user_id == user_id)
                           .order_by(Order.created_at.desc(), Order.id.desc()))
        orders = await session_execute(stmt.execution_options(populate_existing=True), session)
        return [OrderDTO.model_validate(order, from_attributes=True) for order in orders.scalars().all()]
