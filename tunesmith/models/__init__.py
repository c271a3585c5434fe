"""API request/response schemas."""

from tunesmith.models.callback import CallbackAck, CoverCallbackPayload
from tunesmith.models.common import ErrorResponse
from tunesmith.models.generation import (
    GenerationResponse,
    GenerationStatusResponse,
    TrackResponse,
    TrackStatusItem,
)
from tunesmith.models.lyrics import (
    GenerateLyricsRequest,
    GenerateLyricsResponse,
    TimestampedLyricsRequest,
)

__all__ = [
    "CallbackAck",
    "CoverCallbackPayload",
    "ErrorResponse",
    "GenerateLyricsRequest",
    "GenerateLyricsResponse",
    "GenerationResponse",
    "GenerationStatusResponse",
    "TimestampedLyricsRequest",
    "TrackResponse",
    "TrackStatusItem",
]
