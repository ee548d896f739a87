"""
FastAPI dependencies shared by all routers: database session, current user
and role guards.
"""

from typing import AsyncGenerator

from fastapi import Depends, Query
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_db_session
from enums.gender import Gender
from enums.role import Role
from exceptions import MissingTokenException, PermissionDeniedException
from models.user import UserDTO
from services.auth import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with get_db_session() as session:
        yield session


async def get_current_user(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
                           session: AsyncSession = Depends(get_session)) -> UserDTO:
    if credentials is None or not credentials.credentials:
        raise MissingTokenException()
    return await AuthService.authenticate(credentials.credentials, session)


def require_roles(*roles: Role, message: str):
    """
    Build a dependency that lets only the given roles through.

    Usage:
        user: UserDTO = Depends(require_roles(Role.ADMIN, message="Access denied. Admin only."))
    """

    async def role_guard(user: UserDTO = Depends(get_current_user)) -> UserDTO:
        if user.role not in roles:
            raise PermissionDeniedException(message, user_id=user.id, role=user.role.value)
        return user

    return role_guard


require_admin = require_roles(Role.ADMIN, message="Access denied. Admin only.")
require_seller_or_admin = require_roles(Role.ADMIN, Role.SELLER, message="Access denied. Admin or Seller only.")


async def gender_query(gender: str | None = Query(default=None)) -> Gender | None:
    """?gender= filter, matched case-insensitively against the Gender enum."""
    if not gender:
        return None
    try:
        return Gender(gender.upper())
    except ValueError:
        raise RequestValidationError([{
            "type": "enum",
            "loc": ("query", "gender"),
            "msg": f"Input should be {', '.join(g.value for g in Gender)}",
            "input": gender,
        }])
