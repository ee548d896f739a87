from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_flush
from models.orderItem import OrderItem, OrderItemDTO


class OrderItemRepository:
    @staticmethod
    async def create_many(order_id: int, order_items: list[OrderItemDTO], session: AsyncSession | Session) -> None:
        session.add_all([
            OrderItem(
                order_id=order_id,
                product_id=order_item.product_id,
                quantity=order_item.quantity,
                price=order_item.price
            )
            for order_item in order_items
        ])
        await session_flush(session)
