"""
Test suite for TrackReconciler.

Runs against in-memory SQLite so upserts, commits and rollbacks are real.

System role: Verification of idempotent track materialization
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from tunesmith.application.services.track_reconciler import TrackReconciler
from tunesmith.boundary.db.CRUD.generation_crud import generation_crud
from tunesmith.boundary.db.CRUD.track_crud import track_crud
from tunesmith.core.track_extractor import ExtractedTrack


def as_naive_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo; compare everything as naive UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def two_tracks(suffix: str = "") -> list[ExtractedTrack]:
    return [
        ExtractedTrack(position=1, title=f"One{suffix}", id="a1", audio_url=f"https://cdn/1{suffix}.mp3"),
        ExtractedTrack(position=2, title=f"Two{suffix}", id="a2", audio_url=f"https://cdn/2{suffix}.mp3"),
    ]


@pytest.fixture
async def generation(test_async_db, task_id):
    """Provide a committed generation for the sample task id."""
    created = await generation_crud.create(test_async_db, task_id=task_id, prompt="lofi")
    await test_async_db.commit()
    return created


class TestTrackReconcilerNoOp:
    """Test suite for reconcile() preconditions."""

    @pytest.mark.asyncio
    async def test_missing_generation_is_noop(self, test_async_db, task_id) -> None:
        # Act
        result = await TrackReconciler(test_async_db).reconcile(task_id, None, two_tracks())

        # Assert
        assert result.written == 0
        assert await track_crud.get_by_task_id(test_async_db, task_id) == []

    @pytest.mark.asyncio
    async def test_empty_tracks_is_noop(self, test_async_db, task_id, generation) -> None:
        result = await TrackReconciler(test_async_db).reconcile(task_id, generation, [])

        assert result.written == 0
        assert await track_crud.get_by_task_id(test_async_db, task_id) == []


class TestTrackReconcilerUpsert:
    """Test suite for reconcile() writes."""

    @pytest.mark.asyncio
    async def test_creates_one_row_per_position(self, test_async_db, task_id, generation) -> None:
        # Act
        result = await TrackReconciler(test_async_db).reconcile(task_id, generation, two_tracks())

        # Assert
        rows = await track_crud.get_by_task_id(test_async_db, task_id)
        assert result.created == [1, 2]
        assert [(r.index, r.title, r.audio_id, r.audio_url) for r in rows] == [
            (1, "One", "a1", "https://cdn/1.mp3"),
            (2, "Two", "a2", "https://cdn/2.mp3"),
        ]
        assert all(r.generation_id == generation.id for r in rows)

    @pytest.mark.asyncio
    async def test_repeated_reconcile_is_idempotent(self, test_async_db, task_id, generation) -> None:
        # Arrange
        reconciler = TrackReconciler(test_async_db)
        await reconciler.reconcile(task_id, generation, two_tracks())
        first_ids = [r.id for r in await track_crud.get_by_task_id(test_async_db, task_id)]

        # Act
        result = await reconciler.reconcile(task_id, generation, two_tracks())

        # Assert
        rows = await track_crud.get_by_task_id(test_async_db, task_id)
        assert result.updated == [1, 2]
        assert result.created == []
        assert [r.id for r in rows] == first_ids

    @pytest.mark.asyncio
    async def test_update_replaces_fields_in_place(self, test_async_db, task_id, generation) -> None:
        reconciler = TrackReconciler(test_async_db)
        await reconciler.reconcile(task_id, generation, two_tracks())

        await reconciler.reconcile(task_id, generation, two_tracks(suffix="-v2"))

        test_async_db.expire_all()
        rows = await track_crud.get_by_task_id(test_async_db, task_id)
        assert len(rows) == 2
        assert [r.audio_url for r in rows] == ["https://cdn/1-v2.mp3", "https://cdn/2-v2.mp3"]
        assert [r.title for r in rows] == ["One-v2", "Two-v2"]

    @pytest.mark.asyncio
    async def test_sets_expiry_to_retention_window(self, test_async_db, task_id, generation) -> None:
        # Arrange
        before = datetime.now(timezone.utc)

        # Act
        await TrackReconciler(test_async_db, retention_days=15).reconcile(task_id, generation, two_tracks())

        # Assert
        after = datetime.now(timezone.utc)
        for row in await track_crud.get_by_task_id(test_async_db, task_id):
            expires = as_naive_utc(row.expires_at)
            assert as_naive_utc(before + timedelta(days=15)) <= expires <= as_naive_utc(after + timedelta(days=15))

    @pytest.mark.asyncio
    async def test_failing_position_does_not_block_others(self, test_async_db, task_id, generation) -> None:
        # Arrange
        tracks = [
            ExtractedTrack(position=1, title="One", audio_url="https://cdn/1.mp3"),
            ExtractedTrack(position=2, title="Two", audio_url="https://cdn/2.mp3"),
            ExtractedTrack(position=3, title="Three", audio_url="https://cdn/3.mp3"),
        ]
        original_create = track_crud.create

        async def flaky_create(session, **fields):
            if fields["index"] == 2:
                raise SQLAlchemyError("disk full")
            return await original_create(session, **fields)

        # Act
        with patch.object(track_crud, "create", side_effect=flaky_create):
            result = await TrackReconciler(test_async_db).reconcile(task_id, generation, tracks)

        # Assert
        rows = await track_crud.get_by_task_id(test_async_db, task_id)
        assert result.created == [1, 3]
        assert result.failed == [2]
        assert [r.index for r in rows] == [1, 3]
