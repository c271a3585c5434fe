"""
Domain core: status normalization, payload extraction and filename rules.

Pure functions with no I/O; shared by the poll and callback paths.
"""

from tunesmith.core.filenames import (
    cover_filename,
    is_safe_audio_filename,
    is_safe_content_filename,
    is_safe_cover_filename,
)
from tunesmith.core.status_normalizer import (
    FAILED_STATUSES,
    JobState,
    is_final,
    normalize_status,
)
from tunesmith.core.track_extractor import (
    ExtractedTrack,
    extract_error_message,
    extract_status_token,
    extract_tracks,
)

__all__ = [
    "FAILED_STATUSES",
    "ExtractedTrack",
    "JobState",
    "cover_filename",
    "extract_error_message",
    "extract_status_token",
    "extract_tracks",
    "is_final",
    "is_safe_audio_filename",
    "is_safe_content_filename",
    "is_safe_cover_filename",
    "normalize_status",
]
