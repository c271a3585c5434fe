"""
Lyrics API endpoints.

Routes: POST /lyrics, POST /lyrics/timestamped

Dependencies: tunesmith.application.services, tunesmith.models
System role: Lyrics HTTP API
"""

from typing import Any

from fastapi import APIRouter, Depends

from tunesmith.api.deps import get_lyrics_service
from tunesmith.application.services import LyricsService
from tunesmith.models.lyrics import (
    GenerateLyricsRequest,
    GenerateLyricsResponse,
    TimestampedLyricsRequest,
)

from .router_utils import handle_service_errors

router = APIRouter(prefix="/lyrics", tags=["lyrics"])


@router.post("", response_model=GenerateLyricsResponse)
@handle_service_errors
async def generate_lyrics(
    request: GenerateLyricsRequest,
    lyrics_service: LyricsService = Depends(get_lyrics_service),
) -> GenerateLyricsResponse:
    """
    Submit a lyrics prompt (at most 200 words).

    Raises:
        HTTPException(400): Prompt missing
        HTTPException(422): Prompt longer than 200 words
        HTTPException(502): Provider returned no taskId
    """
    task_id = await lyrics_service.generate(request.prompt)
    return GenerateLyricsResponse(task_id=task_id)


@router.post("/timestamped")
@handle_service_errors
async def get_timestamped_lyrics(
    request: TimestampedLyricsRequest,
    lyrics_service: LyricsService = Depends(get_lyrics_service),
) -> Any:
    """Fetch timestamped lyrics for a generated track."""
    return await lyrics_service.get_timestamped(request.task_id, request.audio_id)
