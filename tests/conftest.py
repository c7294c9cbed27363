"""
Pytest fixtures - in-memory test DB, HTTP client, users and auth headers.
Each test gets a fresh database; requests share the test session through a get_db override.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.main import app
from app.db.session import get_db
from app.db.models import User
from app.core.security import hash_password, create_access_token


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# bcrypt is deliberately slow; hash once for every fixture user
TEST_PASSWORD = "password123"
TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def _make_user(session: AsyncSession, email: str, name: str, *, is_active: bool = True) -> User:
    user = User(
        email=email,
        name=name,
        hashed_password=TEST_PASSWORD_HASH,
        is_active=is_active,
    )
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


def bearer(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def user_factory(session: AsyncSession):
    """Create extra users inside a test: await user_factory(email, name)."""

    async def factory(email: str, name: str, *, is_active: bool = True) -> User:
        return await _make_user(session, email, name, is_active=is_active)

    return factory


@pytest.fixture
def headers_for():
    return bearer


@pytest_asyncio.fixture
async def test_user(session: AsyncSession) -> User:
    return await _make_user(session, "alice@example.com", "Alice")


@pytest_asyncio.fixture
async def other_user(session: AsyncSession) -> User:
    return await _make_user(session, "bob@example.com", "Bob")


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    return bearer(test_user)


@pytest.fixture
def other_headers(other_user: User) -> dict:
    return bearer(other_user)
