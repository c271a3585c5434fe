"""
Test suite for GenerationCRUD database operations.

Runs on in-memory SQLite to cover ordering and single-write cover updates.

System role: Verification of generation persistence layer
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from tunesmith.boundary.db.CRUD.generation_crud import GenerationCRUD, generation_crud
from tunesmith.boundary.db.models.generation_model import GenerationModel


class TestGenerationCRUDInit:
    """Test suite for GenerationCRUD initialization."""

    def test_init_should_set_model_to_generation_model(self) -> None:
        # Act
        crud = GenerationCRUD()

        # Assert
        assert crud.model == GenerationModel


class TestGenerationCRUDGetLatest:
    """Test suite for GenerationCRUD.get_latest_by_task_id()."""

    @pytest.mark.asyncio
    async def test_should_return_most_recent_row(self, test_async_db) -> None:
        # Arrange
        now = datetime.now(timezone.utc)
        await generation_crud.create(test_async_db, task_id="job1", prompt="old", created_at=now - timedelta(hours=1))
        await generation_crud.create(test_async_db, task_id="job1", prompt="new", created_at=now)
        await generation_crud.create(test_async_db, task_id="job2", prompt="other", created_at=now + timedelta(hours=1))
        await test_async_db.commit()

        # Act
        result = await generation_crud.get_latest_by_task_id(test_async_db, "job1")

        # Assert
        assert result is not None
        assert result.prompt == "new"

    @pytest.mark.asyncio
    async def test_should_return_none_when_missing(self, test_async_db) -> None:
        assert await generation_crud.get_latest_by_task_id(test_async_db, "nope") is None


class TestGenerationCRUDUpdateCover:
    """Test suite for GenerationCRUD.update_cover()."""

    @pytest.mark.asyncio
    async def test_should_write_both_cover_fields(self, test_async_db) -> None:
        # Arrange
        generation = await generation_crud.create(test_async_db, task_id="job1")
        await test_async_db.commit()

        # Act
        updated = await generation_crud.update_cover(
            test_async_db,
            generation.id,
            cover_task_id="sub1",
            cover_images=["job1-cover-1.png"],
        )
        await test_async_db.commit()

        # Assert
        assert updated is not None
        assert updated.cover_task_id == "sub1"
        assert updated.cover_images == ["job1-cover-1.png"]

    @pytest.mark.asyncio
    async def test_should_return_none_for_unknown_id(self, test_async_db) -> None:
        result = await generation_crud.update_cover(
            test_async_db, uuid.uuid4(), cover_task_id="sub1", cover_images=[]
        )

        assert result is None
