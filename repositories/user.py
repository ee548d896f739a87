from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute, session_flush
from enums.role import Role
from models.user import User, UserDTO, UserCredentialsDTO


class UserRepository:
    @staticmethod
    async def get_by_id(user_id: int, session: AsyncSession | Session) -> UserDTO | None:
        stmt = select(User).where(User.id == user_id).execution_options(populate_existing=True)
        user = await session_execute(stmt, session)
        user = user.scalar()
        if user is not None:
            return UserDTO.model_validate(user, from_attributes=True)
        else:
            return user

    @staticmethod
    async def get_credentials_by_email(email: str, session: AsyncSession | Session) -> UserCredentialsDTO | None:
        stmt = select(User).where(User.email == email)
        user = await session_execute(stmt, session)
        user = user.scalar()
        if user is not None:
            return UserCredentialsDTO.model_validate(user, from_attributes=True)
        else:
            return user

    @staticmethod
    async def exists_by_email(email: str, session: AsyncSession | Session) -> bool:
        stmt = select(User.id).where(User.email == email)
        user_id = await session_execute(stmt, session)
        return user_id.scalar() is not None

    @staticmethod
    async def create(email: str, password_hash: str, name: str | None, session: AsyncSession | Session) -> int:
        user = User(email=email, password_hash=password_hash, name=name, role=Role.USER)
        session.add(user)
        await session_flush(session)
        return user.id

    @staticmethod
    async def update_role(user_id: int, role: Role, session: AsyncSession | Session) -> None:
        stmt = (update(User)
                .where(User.id == user_id)
                .values(role=role)
                .execution_options(synchronize_session=False))
        await session_execute(stmt, session)
