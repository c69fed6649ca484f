"""Test fixtures for the Portal do Romeiro backend."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from romeiro.core.config import get_settings
from romeiro.core.security import create_access_token, get_password_hash
from romeiro.db.base import Base
from romeiro.db.session import dispose_engine, get_sessionmaker
from romeiro.main import app
from romeiro.models import User, UserRole


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url, future=True)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)
    get_settings.cache_clear()


@pytest_asyncio.fixture()
async def app_context(
    reset_database: AsyncIterator[None], db_url: str
) -> AsyncIterator[dict[str, object]]:
    """Yield an async client plus a seeded admin and pilgrim."""
    sessionmaker = get_sessionmaker(db_url)
    pilgrim_password = "romeiro123"

    async with sessionmaker() as session:
        admin = User(
            name="Admin Portal",
            email="admin@example.com",
            hashed_password=get_password_hash("admin-pass"),
            role=UserRole.ADMIN,
            accepted_terms=True,
        )
        pilgrim = User(
            name="Maria Romeira",
            email="maria@example.com",
            hashed_password=get_password_hash(pilgrim_password),
            role=UserRole.PILGRIM,
            accepted_terms=True,
        )
        session.add_all([admin, pilgrim])
        await session.commit()

        context: dict[str, object] = {
            "admin_id": admin.id,
            "pilgrim_id": pilgrim.id,
            "pilgrim_email": pilgrim.email,
            "pilgrim_password": pilgrim_password,
            "admin_headers": {
                "Authorization": f"Bearer {create_access_token(admin.id, role='admin')}"
            },
            "pilgrim_headers": {
                "Authorization": f"Bearer {create_access_token(pilgrim.id, role='pilgrim')}"
            },
        }

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        context["client"] = client
        yield context
