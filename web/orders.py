from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from models.order import OrderDTO
from models.user import UserDTO
from services.order import OrderService
from web.dependencies import get_session, get_current_user

orders_router = APIRouter(prefix="/api/orders", tags=["orders"])


@orders_router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(user: UserDTO = Depends(get_current_user),
                       session: AsyncSession = Depends(get_session)) -> OrderDTO:
    return await OrderService.create_order(user.id, session)


@orders_router.get("")
async def get_orders(user: UserDTO = Depends(get_current_user),
                     session: AsyncSession = Depends(get_session)) -> list[OrderDTO]:
    return await OrderService.list_orders(user.id, session)


@orders_router.get("/{order_id}")
async def get_order(order_id: int,
                    user: UserDTO = Depends(get_current_user),
                    session: AsyncSession = Depends(get_session)) -> OrderDTO:
    return await OrderService.get_order(order_id, user.id, session)
