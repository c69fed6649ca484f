"""Database engine and session helpers."""

from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from romeiro.core.config import get_settings

_engine_cache: dict[str, AsyncEngine] = {}
_sessionmaker_cache: dict[str, async_sessionmaker[AsyncSession]] = {}


def _resolve_database_url(override: str | None = None) -> str:
    return override or get_settings().database_url


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _build_engine(url: str) -> AsyncEngine:
    engine = create_async_engine(url, echo=False, future=True)
    if engine.dialect.name == "sqlite":
        # ON DELETE CASCADE / SET NULL are ignored by SQLite unless enabled per connection
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_sessionmaker(
    database_url: str | None = None,
) -> async_sessionmaker[AsyncSession]:
    """Return (and cache) an async sessionmaker for the given database URL."""
    url = _resolve_database_url(database_url)
    if url not in _sessionmaker_cache:
        engine = _build_engine(url)
        _engine_cache[url] = engine
        _sessionmaker_cache[url] = async_sessionmaker(
            engine, expire_on_commit=False, class_=AsyncSession
        )
    return _sessionmaker_cache[url]


def get_engine(database_url: str | None = None) -> AsyncEngine:
    """Return the cached engine backing :func:`get_sessionmaker`."""
    url = _resolve_database_url(database_url)
    get_sessionmaker(url)
    return _engine_cache[url]


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield an async database session using the configured engine."""
    async with get_sessionmaker()() as session:
        yield session


async def dispose_engine(database_url: str | None = None) -> None:
    """Dispose the cached engine/sessionmaker for the given database URL."""
    url = _resolve_database_url(database_url)
    _sessionmaker_cache.pop(url, None)
    engine = _engine_cache.pop(url, None)
    if engine is not None:
        await engine.dispose()
