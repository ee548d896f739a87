import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit
from enums.role import Role
from exceptions import UserNotFoundException, UserAlreadySellerException
from models.user import UserDTO
from repositories.user import UserRepository


class UserService:

    @staticmethod
    async def get_profile(user_id: int, session: AsyncSession | Session) -> UserDTO:
        user = await UserRepository.get_by_id(user_id, session)
        if user is None:
            raise UserNotFoundException(user_id=user_id)
        return user

    @staticmethod
    async def become_seller(user: UserDTO, session: AsyncSession | Session) -> UserDTO:
        """
        Upgrade the current user to SELLER.

        Only an existing SELLER is rejected; an ADMIN calling this is switched
        to SELLER like anyone else.
        """
        if user.role == Role.SELLER:
            raise UserAlreadySellerException(user.id)

        await UserRepository.update_role(user.id, Role.SELLER, session)
        await session_commit(session)
        logging.info(f"User {user.id} role changed {user.role.value} -> {Role.SELLER.value}")
        return await UserService.get_profile(user.id, session)
