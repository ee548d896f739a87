from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy import Enum as SQLEnum

from enums.role import Role
from models.base import Base, DTO


class User(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    email = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=True)
    role = Column(SQLEnum(Role), nullable=False, default=Role.USER)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)


class UserDTO(DTO):
    id: int | None = None
    email: str | None = None
    name: str | None = None
    role: Role | None = None
    created_at: datetime | None = None


class UserCredentialsDTO(UserDTO):
    """UserDTO plus the stored hash; never returned by the API."""
    password_hash: str | None = None


class AuthTokenDTO(DTO):
    token: str
    user: UserDTO
