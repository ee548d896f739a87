"""
Unit Tests: AuthService / UserService

Tests for services/auth.py and services/user.py covering:
- register() / login() - token issuing, duplicate email, bad credentials
- authenticate() - token -> current user, unknown users
- become_seller() - role upgrade rules
"""

import pytest

from enums.role import Role
from exceptions import (
    InvalidCredentialsException,
    InvalidTokenException,
    UserAlreadyExistsException,
    UserAlreadySellerException,
)
from models.user import UserDTO
from services.auth import AuthService
from services.user import UserService
from utils.security import create_access_token, decode_access_token


class TestRegisterLogin:

    @pytest.mark.asyncio
    async def test_register(self, session):
        result = await AuthService.register("New@Example.com", "secret123", "Newbie", session)

        assert result.user.email == "new@example.com"
        assert result.user.role == Role.USER
        assert decode_access_token(result.token) == result.user.id

    @pytest.mark.asyncio
    async def test_register_duplicate(self, session, make_user):
        make_user(email="taken@example.com")

        with pytest.raises(UserAlreadyExistsException) as exc_info:
            await AuthService.register("taken@example.com", "secret123", None, session)

        assert exc_info.value.message == "User already exists"

    @pytest.mark.asyncio
    async def test_login(self, session, make_user):
        user_id = make_user(email="buyer@example.com", password="secret123").id

        result = await AuthService.login("buyer@example.com", "secret123", session)

        assert result.user.id == user_id
        assert decode_access_token(result.token) == user_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email, password", [
        ("buyer@example.com", "wrong-password"),
        ("nobody@example.com", "secret123"),
    ])
    async def test_login_invalid_credentials(self, session, make_user, email, password):
        make_user(email="buyer@example.com", password="secret123")

        with pytest.raises(InvalidCredentialsException):
            await AuthService.login(email, password, session)


class TestAuthenticate:

    @pytest.mark.asyncio
    async def test_role_comes_from_database(self, session, make_user):
        user = make_user(role=Role.SELLER)
        # Token still claims USER
        token = create_access_token(user.id, Role.USER)

        current_user = await AuthService.authenticate(token, session)

        assert current_user.role == Role.SELLER

    @pytest.mark.asyncio
    async def test_unknown_user(self, session):
        with pytest.raises(InvalidTokenException):
            await AuthService.authenticate(create_access_token(4242, Role.USER), session)


class TestBecomeSeller:

    @pytest.mark.asyncio
    async def test_user_becomes_seller(self, session, make_user):
        user = UserDTO.model_validate(make_user())

        updated = await UserService.become_seller(user, session)

        assert updated.role == Role.SELLER
        assert (await UserService.get_profile(user.id, session)).role == Role.SELLER

    @pytest.mark.asyncio
    async def test_already_seller(self, session, make_user):
        user = UserDTO.model_validate(make_user(role=Role.SELLER))

        with pytest.raises(UserAlreadySellerException) as exc_info:
            await UserService.become_seller(user, session)

        assert exc_info.value.message == "User is already a seller"

    @pytest.mark.asyncio
    async def test_admin_is_switched_to_seller(self, session, make_user):
        user = UserDTO.model_validate(make_user(role=Role.ADMIN))

        updated = await UserService.become_seller(user, session)

        assert updated.role == Role.SELLER
