from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, selectinload

from db import session_execute, session_flush
from models.product import Product
from models.wishlistItem import WishlistItem, WishlistItemDTO


class WishlistItemRepository:
    @staticmethod
    async def get_by_user_id(user_id: int, session: AsyncSession | Session) -> list[WishlistItemDTO]:
        stmt = (select(WishlistItem)
                .where(WishlistItem.user_id == user_id)
                .options(selectinload(WishlistItem.product).selectinload(Product.category))
                .order_by(WishlistItem.created_at.desc(), WishlistItem.id.desc())
                .execution_options(populate_existing=True))
        items = await session_execute(stmt, session)
        return [WishlistItemDTO.model_validate(item, from_attributes=True) for item in items.scalars().all()]

    @staticmethod
    async def get_by_id(wishlist_item_id: int, session: AsyncSession | Session) -> WishlistItemDTO | None:
        stmt = (select(WishlistItem)
                .where(WishlistItem.id == wishlist_item_id)
                .options(selectinload(WishlistItem.product).selectinload(Product.category))
                .execution_options(populate_existing=True))
        item = await session_execute(stmt, session)
        item = item.scalar()
        if item is None:
            return None
        return WishlistItemDTO.model_validate(item, from_attributes=True)

    @staticmethod
    async def exists(user_id: int, product_id: int, session: AsyncSession | Session) -> bool:
        stmt = select(WishlistItem.id).where(WishlistItem.user_id == user_id,
                                             WishlistItem.product_id == product_id)
        result = await session_execute(stmt, session)
        return result.scalar() is not None

    @staticmethod
    async def create(user_id: int, product_id: int, session: AsyncSession | Session) -> int:
        item = WishlistItem(user_id=user_id, product_id=product_id)
        session.add(item)
        await session_flush(session)
        return item.id

    @staticmethod
    async def delete(user_id: int, product_id: int, session: AsyncSession | Session) -> int:
        stmt = (delete(WishlistItem)
                .where(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
                .execution_options(synchronize_session=False))
        result = await session_execute(stmt, session)
        return result.rowcount
