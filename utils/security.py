"""
Password hashing and access token helpers.

Tokens are HS256 JWTs carrying the user id (`sub`) and role. The role in the
token is informational only; authorization always re-reads the user row.
"""

from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError
from passlib.context import CryptContext

import config
from enums.role import Role
from exceptions import InvalidTokenException

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def create_access_token(user_id: int, role: Role, expires_minutes: int | None = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes or config.JWT_EXPIRE_MINUTES)
    to_encode = {"sub": str(user_id), "role": role.value, "exp": expire}
    return jwt.encode(to_encode, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    Validate a token and return the user id it was issued for.

    Raises:
        InvalidTokenException: bad signature, expired, or no usable `sub` claim
    """
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except JWTError as e:
        raise InvalidTokenException(reason=str(e))

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise InvalidTokenException(reason="missing subject")
    return int(subject)
