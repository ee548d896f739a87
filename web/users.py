from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import UserDTO
from services.user import UserService
from web.dependencies import get_session, get_current_user

users_router = APIRouter(prefix="/api/users", tags=["users"])


@users_router.get("/profile")
async def get_profile(user: UserDTO = Depends(get_current_user),
                      session: AsyncSession = Depends(get_session)) -> UserDTO:
    return await UserService.get_profile(user.id, session)


@users_router.post("/become-seller")
async def become_seller(user: UserDTO = Depends(get_current_user),
                        session: AsyncSession = Depends(get_session)):
    updated_user = await UserService.become_seller(user, session)
    return {"message": "Role updated to SELLER", "user": updated_user}
