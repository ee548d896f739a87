from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import AuthTokenDTO, UserDTO
from services.auth import AuthService
from web.dependencies import get_session, get_current_user
from web.schemas import RegisterRequest, LoginRequest

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])


@auth_router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, session: AsyncSession = Depends(get_session)) -> AuthTokenDTO:
    return await AuthService.register(payload.email, payload.password, payload.name, session)


@auth_router.post("/login")
async def login(payload: LoginRequest, session: AsyncSession = Depends(get_session)) -> AuthTokenDTO:
    return await AuthService.login(payload.email, payload.password, session)


@auth_router.get("/me")
async def me(user: UserDTO = Depends(get_current_user)) -> UserDTO:
    return user
