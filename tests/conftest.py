"""
Pytest configuration and shared fixtures
"""

import os

# settings are read at import time, so the test environment must be in place first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-not-for-production")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin import app
from shop_admin.db.main import get_session
from shop_admin.db.models import Role, User
from shop_admin.auth.utils import create_access_token, generate_passwd_hash


# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_PASSWORD = "admin-password"
CUSTOMER_PASSWORD = "customer-password"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database session for each test.

    Uses in-memory SQLite database for fast test execution.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_factory() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(autouse=True)
def token_blocklist(monkeypatch):
    """Replace the redis blocklist with an in-process set of revoked jtis."""
    revoked = set()

    async def add_jti_to_blocklist(jti: str) -> None:
        revoked.add(jti)

    async def token_in_blocklist(jti: str) -> bool:
        return jti in revoked

    monkeypatch.setattr("shop_admin.auth.routes.add_jti_to_blocklist", add_jti_to_blocklist)
    monkeypatch.setattr("shop_admin.auth.dependencies.token_in_blocklist", token_in_blocklist)
    return revoked


@pytest_asyncio.fixture(scope="function")
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async HTTP client for testing FastAPI endpoints.
    Override the database dependency to use the test database.
    """
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def roles(db_session: AsyncSession) -> dict:
    admin = Role(name="admin")
    customer = Role(name="customer")
    db_session.add_all([admin, customer])
    await db_session.commit()
    return {"admin": admin, "customer": customer}


@pytest_asyncio.fixture(scope="function")
async def admin_user(db_session: AsyncSession, roles: dict) -> User:
    user = User(
        name="Admin User",
        email="admin@example.com",
        password_hash=generate_passwd_hash(ADMIN_PASSWORD),
        roles=[roles["admin"]],
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture(scope="function")
async def customer_user(db_session: AsyncSession, roles: dict) -> User:
    user = User(
        name="Customer User",
        email="customer@example.com",
        password_hash=generate_passwd_hash(CUSTOMER_PASSWORD),
        roles=[roles["customer"]],
    )
    db_session.add(user)
    await db_session.commit()
    return user


def token_for(user: User) -> str:
    return create_access_token(
        user_data={
            'id': str(user.uid),
            'email': user.email,
            'roles': user.role_names
        }
    )


@pytest.fixture
def admin_headers(admin_user: User) -> dict:
    return {"Authorization": f"Bearer {token_for(admin_user)}"}


@pytest.fixture
def customer_headers(customer_user: User) -> dict:
    return {"Authorization": f"Bearer {token_for(customer_user)}"}
