from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from models.cartItem import CartItemDTO, CartSummaryDTO
from models.user import UserDTO
from services.cart import CartService
from web.dependencies import get_session, get_current_user
from web.schemas import AddToCartRequest, UpdateCartItemRequest

cart_router = APIRouter(prefix="/api/cart", tags=["cart"])


@cart_router.get("")
async def get_cart(user: UserDTO = Depends(get_current_user),
                   session: AsyncSession = Depends(get_session)) -> CartSummaryDTO:
    return await CartService.get_cart(user.id, session)


@cart_router.post("", status_code=status.HTTP_201_CREATED)
async def add_to_cart(payload: AddToCartRequest,
                      user: UserDTO = Depends(get_current_user),
                      session: AsyncSession = Depends(get_session)) -> CartItemDTO:
    return await CartService.add_to_cart(user.id, payload.product_id, payload.quantity, session)


@cart_router.put("/{cart_item_id}")
async def update_cart_item(cart_item_id: int,
                           payload: UpdateCartItemRequest,
                           user: UserDTO = Depends(get_current_user),
                           session: AsyncSession = Depends(get_session)) -> CartItemDTO:
    return await CartService.update_quantity(user.id, cart_item_id, payload.quantity, session)


@cart_router.delete("/{cart_item_id}")
async def remove_cart_item(cart_item_id: int,
                           user: UserDTO = Depends(get_current_user),
                           session: AsyncSession = Depends(get_session)):
    await CartService.remove(user.id, cart_item_id, session)
    return {"message": "Item removed from cart"}
