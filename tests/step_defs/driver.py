"""
Synchronous driver for BDD steps: one event loop, one in-memory database, one client per scenario.
"""

import asyncio

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.main import app


class ApiDriver:
    def __init__(self):
        self.loop = asyncio.new_event_loop()
        self.engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        self.sessionmaker = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )
        self.client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        self.tokens: dict[str, str] = {}
        self.run(self._create_schema())

        async def override_get_db():
            async with self.sessionmaker() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

        app.dependency_overrides[get_db] = override_get_db

    async def _create_schema(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    def run(self, coro):
        return self.loop.run_until_complete(coro)

    def request(self, method: str, url: str, user: str | None = None, **kwargs):
        headers = {}
        if user is not None:
            headers["Authorization"] = f"Bearer {self.tokens[user]}"
        return self.run(self.client.request(method, url, headers=headers, **kwargs))

    def register(self, user: str) -> None:
        response = self.request(
            "POST",
            "/api/auth/register",
            json={"name": user.title(), "email": f"{user}@example.com", "password": "password123"},
        )
        assert response.status_code == 201, response.text
        self.tokens[user] = response.json()["token"]

    def close(self) -> None:
        app.dependency_overrides.clear()
        self.run(self.client.aclose())
        self.run(self.engine.dispose())
        self.loop.close()
