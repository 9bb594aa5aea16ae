"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from simplebank.core.config import Settings
from simplebank.infrastructure.database.base import Base

# Seconds a SQLite connection waits on a locked database before failing.
SQLITE_BUSY_TIMEOUT = 30


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings) -> AsyncEngine:
    url = settings.database_url
    engine_kwargs: dict[str, Any] = {"echo": settings.db_echo}
    if settings.db_pool_size is not None:
        engine_kwargs["pool_size"] = settings.db_pool_size
    if settings.db_max_overflow is not None:
        engine_kwargs["max_overflow"] = settings.db_max_overflow

    backend = url.get_backend_name()
    if backend == "postgresql" and "sslmode" in url.query:
        # asyncpg takes the libpq sslmode through its ``ssl`` argument.
        engine_kwargs["connect_args"] = {"ssl": url.query["sslmode"]}
        url = url.difference_update_query(["sslmode"])
    elif backend == "sqlite":
        engine_kwargs["connect_args"] = {"timeout": SQLITE_BUSY_TIMEOUT}

    engine = create_async_engine(url, **engine_kwargs)
    if backend == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def ping(engine: AsyncEngine) -> None:
    """Open a connection and run a trivial query; raises if the database is unreachable."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def init_db(engine: AsyncEngine) -> None:
    """Create database tables in development mode (migrations preferred)."""
    # Deferred so the models register on Base without an import cycle.
    from simplebank.db import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
