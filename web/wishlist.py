from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import UserDTO
from models.wishlistItem import WishlistItemDTO
from services.wishlist import WishlistService
from web.dependencies import get_session, get_current_user
from web.schemas import AddToWishlistRequest

wishlist_router = APIRouter(prefix="/api/wishlist", tags=["wishlist"])


@wishlist_router.get("")
async def get_wishlist(user: UserDTO = Depends(get_current_user),
                       session: AsyncSession = Depends(get_session)) -> list[WishlistItemDTO]:
    return await WishlistService.get_wishlist(user.id, session)


@wishlist_router.post("", status_code=status.HTTP_201_CREATED)
async def add_to_wishlist(payload: AddToWishlistRequest,
                          user: UserDTO = Depends(get_current_user),
                          session: AsyncSession = Depends(get_session)) -> WishlistItemDTO:
    return await WishlistService.add(user.id, payload.product_id, session)


@wishlist_router.delete("/{product_id}")
async def remove_from_wishlist(product_id: int,
                               user: UserDTO = Depends(get_current_user),
                               session: AsyncSession = Depends(get_session)):
    await WishlistService.remove(user.id, product_id, session)
    return {"message": "Item removed from wishlist"}
