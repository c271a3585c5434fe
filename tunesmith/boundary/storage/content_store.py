"""
Content directory store.

Saved track audio and cover images share one directory. Every filename is
re-validated against the audio/cover patterns before touching the disk.

Dependencies: asyncio, pathlib, tunesmith.core.filenames
System role: Durable artifact storage
"""

import asyncio
from pathlib import Path

from tunesmith.core.exceptions import UnsafeFilenameError
from tunesmith.core.filenames import is_safe_content_filename


class ContentStore:
    """Filesystem store rooted at a single directory."""

    def __init__(self, directory: str | Path) -> None:
        """
        Initialize content store.

        Args:
            directory: Root directory for saved content (created on first write)
        """
        self.directory = Path(directory)

    def ensure_directory(self) -> Path:
        """Create the content directory if it does not exist."""
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    def path_for(self, filename: str) -> Path:
        """
        Resolve a validated filename inside the content directory.

        Raises:
            UnsafeFilenameError: If the filename fails validation
        """
        if not is_safe_content_filename(filename):
            raise UnsafeFilenameError(filename)
        return self.directory / filename

    async def write(self, filename: str, content: bytes) -> Path:
        """
        Write ``content`` under ``filename``, replacing any existing file.

        Args:
            filename: Audio or cover filename
            content: File bytes

        Returns:
            Path: Path of the written file

        Raises:
            UnsafeFilenameError: If the filename fails validation
        """
        path = self.path_for(filename)
        await asyncio.to_thread(self._write_sync, path, content)
        return path

    def exists(self, filename: str) -> bool:
        """Whether a validated filename exists; unsafe names never exist."""
        if not is_safe_content_filename(filename):
            return False
        return (self.directory / filename).is_file()

    def _write_sync(self, path: Path, content: bytes) -> None:
        self.ensure_directory()
        path.write_bytes(content)
