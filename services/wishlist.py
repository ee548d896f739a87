from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit
from exceptions import ProductNotFoundException, WishlistItemAlreadyExistsException, WishlistItemNotFoundException
from models.wishlistItem import WishlistItemDTO
from repositories.product import ProductRepository
from repositories.wishlistItem import WishlistItemRepository


class WishlistService:

    @staticmethod
    async def get_wishlist(user_id: int, session: AsyncSession | Session) -> list[WishlistItemDTO]:
        return await WishlistItemRepository.get_by_user_id(user_id, session)

    @staticmethod
    async def add(user_id: int, product_id: int, session: AsyncSession | Session) -> WishlistItemDTO:
        if await ProductRepository.get_by_id(product_id, session) is None:
            raise ProductNotFoundException(product_id)
        if await WishlistItemRepository.exists(user_id, product_id, session):
            raise WishlistItemAlreadyExistsException(user_id, product_id)

        wishlist_item_id = await WishlistItemRepository.create(user_id, product_id, session)
        await session_commit(session)
        return await WishlistItemRepository.get_by_id(wishlist_item_id, session)

    @staticmethod
    async def remove(user_id: int, product_id: int, session: AsyncSession | Session) -> None:
        deleted = await WishlistItemRepository.delete(user_id, product_id, session)
        if deleted == 0:
            raise WishlistItemNotFoundException(user_id, product_id)
        await session_commit(session)
