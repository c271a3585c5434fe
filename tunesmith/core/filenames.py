"""
Filename rules for the shared content directory.

Track audio (``.mp3``) and cover images (``.png``) live side by side in one
directory. Every name is checked here before any read or write so that no
request or provider payload can address a path outside that directory.

Dependencies: re (stdlib)
System role: Path traversal guard for artifact storage
"""

import re

MAX_FILENAME_LENGTH = 200
MAX_TASK_PREFIX_LENGTH = 64

_AUDIO_PATTERN = re.compile(r"^[a-zA-Z0-9_.\-]+\.mp3$")
_COVER_PATTERN = re.compile(r"^[a-zA-Z0-9_.\-]+\.png$")
_TASK_ID_STRIP = re.compile(r"[^a-zA-Z0-9_-]")


def _passes_basic_checks(filename: str) -> bool:
    if not isinstance(filename, str) or not filename:
        return False
    if len(filename) > MAX_FILENAME_LENGTH:
        return False
    return ".." not in filename and "/" not in filename and "\\" not in filename


def is_safe_audio_filename(filename: str) -> bool:
    """Whether ``filename`` is an acceptable track audio name (``*.mp3``)."""
    return _passes_basic_checks(filename) and bool(_AUDIO_PATTERN.fullmatch(filename))


def is_safe_cover_filename(filename: str) -> bool:
    """Whether ``filename`` is an acceptable cover image name (``*.png``)."""
    return _passes_basic_checks(filename) and bool(_COVER_PATTERN.fullmatch(filename))


def is_safe_content_filename(filename: str) -> bool:
    """Whether ``filename`` is safe as either an audio or cover name."""
    return is_safe_audio_filename(filename) or is_safe_cover_filename(filename)


def cover_filename(task_id: str, index: int) -> str:
    """
    Build the cover filename for a generation task and 1-based image index.

    Characters outside ``[A-Za-z0-9_-]`` are stripped from the task id and the
    result is truncated to 64 characters; an empty result falls back to
    ``cover``.

    Args:
        task_id: Provider task id of the parent generation
        index: 1-based image position within the callback batch

    Returns:
        str: ``<prefix>-cover-<index>.png``
    """
    prefix = _TASK_ID_STRIP.sub("", task_id or "")[:MAX_TASK_PREFIX_LENGTH] or "cover"
    return f"{prefix}-cover-{index}.png"
