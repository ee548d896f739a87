"""
Unit Tests: utils/security.py

- password hashing round trip
- token issuing / decoding, expiry, tampering
"""

import pytest
from jose import jwt

import config
from enums.role import Role
from exceptions import InvalidTokenException
from utils.security import hash_password, verify_password, create_access_token, decode_access_token


class TestPasswords:

    def test_hash_is_not_plaintext(self):
        password_hash = hash_password("secret123")

        assert password_hash != "secret123"
        assert verify_password("secret123", password_hash)
        assert not verify_password("secret124", password_hash)


class TestTokens:

    def test_claims(self):
        token = create_access_token(7, Role.SELLER)
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])

        assert payload["sub"] == "7"
        assert payload["role"] == "SELLER"
        assert decode_access_token(token) == 7

    def test_expired(self):
        token = create_access_token(7, Role.USER, expires_minutes=-1)

        with pytest.raises(InvalidTokenException):
            decode_access_token(token)

    def test_wrong_secret(self):
        token = jwt.encode({"sub": "7"}, "another-secret", algorithm="HS256")

        with pytest.raises(InvalidTokenException):
            decode_access_token(token)

    def test_garbage(self):
        with pytest.raises(InvalidTokenException) as exc_info:
            decode_access_token("not-a-token")

        assert exc_info.value.message == "Token is not valid"

    def test_missing_subject(self):
        token = jwt.encode({"role": "USER"}, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)

        with pytest.raises(InvalidTokenException):
            decode_access_token(token)
