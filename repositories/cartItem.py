from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, selectinload

from db import session_execute, session_flush
from models.cartItem import CartItem, CartItemDTO
from models.product import Product


class CartItemRepository:
    @staticmethod
    async def get_by_user_id(user_id: int, session: AsyncSession | Session) -> list[CartItemDTO]:
        """Cart lines of a user with product and product category, oldest first."""
        stmt = (select(CartItem)
                .where(CartItem.user_id == user_id)
                .options(selectinload(CartItem.product).selectinload(Product.category))
                .order_by(CartItem.id.asc())
                .execution_options(populate_existing=True))
        cart_items = await session_execute(stmt, session)
        return [CartItemDTO.model_validate(cart_item, from_attributes=True)
                for cart_item in cart_items.scalars().all()]

    @staticmethod
    async def get_by_id(cart_item_id: int, user_id: int, session: AsyncSession | Session) -> CartItemDTO | None:
        stmt = (select(CartItem)
                .where(CartItem.id == cart_item_id, CartItem.user_id == user_id)
                .options(selectinload(CartItem.product).selectinload(Product.category))
                .execution_options(populate_existing=True))
        cart_item = await session_execute(stmt, session)
        cart_item = cart_item.scalar()
        if cart_item is None:
            return None
        return CartItemDTO.model_validate(cart_item, from_attributes=True)

    @staticmethod
    async def get_by_user_and_product(user_id: int, product_id: int,
                                      session: AsyncSession | Session) -> CartItemDTO | None:
        stmt = (select(CartItem)
                .where(CartItem.user_id == user_id, CartItem.product_id == product_id)
                .options(selectinload(CartItem.product).selectinload(Product.category)))
        cart_item = await session_execute(stmt, session)
        cart_item = cart_item.scalar()
        if cart_item is None:
            return None
        return CartItemDTO.model_validate(cart_item, from_attributes=True)

    @staticmethod
    async def create(cart_item_dto: CartItemDTO, session: AsyncSession | Session) -> int:
        cart_item = CartItem(
            user_id=cart_item_dto.user_id,
            product_id=cart_item_dto.product_id,
            quantity=cart_item_dto.quantity
        )
        session.add(cart_item)
        await session_flush(session)
        return cart_item.id

    @staticmethod
    async def update_quantity(cart_item_id: int, quantity: int, session: AsyncSession | Session) -> None:
        stmt = (update(CartItem)
                .where(CartItem.id == cart_item_id)
                .values(quantity=quantity)
                .execution_options(synchronize_session=False))
        await session_execute(stmt, session)

    @staticmethod
    async def delete(cart_item_id: int, user_id: int, session: AsyncSession | Session) -> int:
        stmt = (delete(CartItem)
                .where(CartItem.id == cart_item_id, CartItem.user_id == user_id)
                .execution_options(synchronize_session=False))
        result = await session_execute(stmt, session)
        return result.rowcount

    @staticmethod
    async def delete_by_user_id(user_id: int, session: AsyncSession | Session) -> int:
        stmt = (delete(CartItem)
                .where(CartItem.user_id == user_id)
                .execution_options(synchronize_session=False))
        result = await session_execute(stmt, session)
        return result.rowcount
