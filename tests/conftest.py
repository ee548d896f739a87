"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import os
import sys
from decimal import Decimal

# Set required environment variables before importing app modules
os.environ['RUNTIME_ENVIRONMENT'] = 'TEST'
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///:memory:'
os.environ['JWT_SECRET'] = 'test_jwt_secret_0123456789abcdef0123456789abcdef'
os.environ['LOG_MASK_SECRETS'] = 'true'

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from db import set_sqlite_pragma
from enums.gender import Gender
from enums.role import Role
from models.base import Base
from models.category import Category
from models.product import Product
from models.user import User
from utils.security import hash_password, create_access_token


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of the test (StaticPool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    event.listen(engine, "connect", set_sqlite_pragma)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Sync session; repositories and services accept it through the db.session_* helpers."""
    session = Session(engine, expire_on_commit=False)
    yield session
    session.rollback()
    session.close()


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def client(session):
    """TestClient bound to the test session. Lifespan is not run, tables come from the engine fixture."""
    from app import app
    from web.dependencies import get_session

    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============================================================================
# Data Factories
# ============================================================================

@pytest.fixture
def make_user(session):
    def _make_user(email: str = "buyer@example.com", role: Role = Role.USER,
                   password: str = "secret123", name: str | None = "Buyer") -> User:
        user = User(email=email, password_hash=hash_password(password), name=name, role=role)
        session.add(user)
        session.commit()
        return user
    return _make_user


@pytest.fixture
def make_category(session):
    def _make_category(name: str = "Shoes", slug: str | None = None, parent_id: int | None = None,
                       gender: Gender | None = None) -> Category:
        category = Category(name=name, slug=slug or name.lower().replace(" ", "-"),
                            parent_id=parent_id, gender=gender)
        session.add(category)
        session.commit()
        return category
    return _make_category


@pytest.fixture
def make_product(session, make_category):
    def _make_product(name: str = "Sneaker", price: str = "10.00", stock: int = 5,
                      category_id: int | None = None, **kwargs) -> Product:
        if category_id is None:
            category_id = make_category(name=f"Category {name}").id
        product = Product(name=name, price=Decimal(price), stock=stock, category_id=category_id, **kwargs)
        session.add(product)
        session.commit()
        return product
    return _make_product


@pytest.fixture
def auth_headers():
    """Build an Authorization header for a user."""
    def _auth_headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}
    return _auth_headers
