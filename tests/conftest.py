"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database sessions, sample provider payloads, temp content directory
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import shutil
import tempfile
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
async def test_session_factory():
    """
    Create an in-memory SQLite session factory with all tables.

    Yields:
        async_sessionmaker: Factory bound to a single shared connection
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool
    from tunesmith.boundary.db.base import Base
    import tunesmith.boundary.db.models  # noqa: F401  (register tables)

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create in-memory SQLite async database session for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def temp_dir():
    """
    Create a temporary directory for test files.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="tunesmith_test_"))
    yield temp_path

    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def task_id() -> str:
    """Provide a provider task id."""
    return "task-abc123"


@pytest.fixture
def success_body() -> dict[str, Any]:
    """Provider record-info body for a finished two-track generation."""
    return {
        "code": 200,
        "msg": "success",
        "data": {
            "taskId": "task-abc123",
            "status": "SUCCESS",
            "response": {
                "sunoData": [
                    {"id": "a1", "audioUrl": "https://cdn.example/a1.mp3", "title": "Morning"},
                    {"id": "a2", "audioUrl": "https://cdn.example/a2.mp3", "title": "Evening"},
                ]
            },
        },
    }


@pytest.fixture
def pending_body() -> dict[str, Any]:
    """Provider record-info body for a job that is still running."""
    return {
        "code": 200,
        "msg": "success",
        "data": {"taskId": "task-abc123", "status": "PENDING", "response": {"sunoData": []}},
    }
