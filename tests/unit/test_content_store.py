"""
Test suite for ContentStore.

System role: Verification of content directory writes
"""

import pytest

from tunesmith.boundary.storage.content_store import ContentStore
from tunesmith.core.exceptions import UnsafeFilenameError


class TestContentStore:
    """Test suite for ContentStore."""

    @pytest.mark.asyncio
    async def test_write_creates_directory_and_file(self, temp_dir) -> None:
        # Arrange
        store = ContentStore(temp_dir / "audio")

        # Act
        path = await store.write("job1-cover-1.png", b"img")

        # Assert
        assert path.read_bytes() == b"img"
        assert store.exists("job1-cover-1.png")

    @pytest.mark.asyncio
    async def test_write_overwrites_existing_file(self, temp_dir) -> None:
        store = ContentStore(temp_dir)

        await store.write("a.mp3", b"old")
        await store.write("a.mp3", b"new")

        assert (temp_dir / "a.mp3").read_bytes() == b"new"

    @pytest.mark.asyncio
    async def test_write_rejects_unsafe_names(self, temp_dir) -> None:
        store = ContentStore(temp_dir)

        with pytest.raises(UnsafeFilenameError):
            await store.write("../escape.png", b"x")

    def test_exists_is_false_for_unsafe_or_missing(self, temp_dir) -> None:
        store = ContentStore(temp_dir)
        (temp_dir / "notes.txt").write_text("x")

        assert not store.exists("notes.txt")
        assert not store.exists("missing.mp3")
        assert not store.exists("../notes.txt")
