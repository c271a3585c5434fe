"""
Engine and session management.

One engine per process. Request handlers get a session through the
``get_async_db`` dependency; cover workers outlive their request and open
their own sessions from the same factory.

Dependencies: sqlalchemy, tunesmith.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from tunesmith.boundary.db.base import Base
from tunesmith.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Build the process-wide async engine from POSTGRES_* settings.

    SQLite (POSTGRES_URL=sqlite+aiosqlite://...) keeps the driver's default
    pool; PostgreSQL gets the configured pool sizing with pre-ping.
    """
    db_config = get_settings().database

    if db_config.is_sqlite:
        return create_async_engine(db_config.async_database_url, echo=db_config.echo_sql)

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory shared by requests and workers.

    expire_on_commit=False keeps loaded rows usable after the per-position
    commits of the track reconciler.
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped session."""
    async with get_async_session_factory()() as session:
        yield session


async def create_tables() -> None:
    """Create any missing tables (no migrations are managed here)."""
    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
