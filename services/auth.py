import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit
from exceptions import (
    InvalidCredentialsException,
    InvalidTokenException,
    UserAlreadyExistsException,
)
from models.user import AuthTokenDTO, UserDTO
from repositories.user import UserRepository
from utils.security import hash_password, verify_password, create_access_token, decode_access_token


class AuthService:

    @staticmethod
    async def register(email: str, password: str, name: str | None,
                       session: AsyncSession | Session) -> AuthTokenDTO:
        email = email.strip().lower()
        if await UserRepository.exists_by_email(email, session):
            raise UserAlreadyExistsException(email)

        user_id = await UserRepository.create(email, hash_password(password), name, session)
        await session_commit(session)
        user = await UserRepository.get_by_id(user_id, session)
        logging.info(f"User {user_id} registered")
        return AuthTokenDTO(token=create_access_token(user.id, user.role), user=user)

    @staticmethod
    async def login(email: str, password: str, session: AsyncSession | Session) -> AuthTokenDTO:
        credentials = await UserRepository.get_credentials_by_email(email.strip().lower(), session)
        # Same error for unknown email and wrong password
        if credentials is None or not verify_password(password, credentials.password_hash):
            logging.warning("Failed login attempt")
            raise InvalidCredentialsException()

        user = UserDTO.model_validate(credentials.model_dump(exclude={'password_hash'}))
        return AuthTokenDTO(token=create_access_token(user.id, user.role), user=user)

    @staticmethod
    async def authenticate(token: str, session: AsyncSession | Session) -> UserDTO:
        """
        Resolve a bearer token to the current user.

        The role is read from the database, so a role change (become-seller)
        applies to tokens issued before it.
        """
        user_id = decode_access_token(token)
        user = await UserRepository.get_by_id(user_id, session)
        if user is None:
            raise InvalidTokenException(reason=f"user {user_id} no longer exists")
        return user
