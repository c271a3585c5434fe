"""
Generation and status schemas.

Dependencies: pydantic
System role: Status polling and generation API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TrackStatusItem(BaseModel):
    """One track as reported by the provider in a status response."""

    id: str | None = None
    position: int
    title: str
    audio_url: str | None = None
    status: str | None = None


class GenerationStatusResponse(BaseModel):
    """Normalized view of one provider status poll."""

    task_id: str
    status: str = Field(description="Canonical status: PENDING, SUCCESS or FAILED")
    raw_status: str | None = Field(default=None, description="Status token as reported by the provider")
    is_final: bool
    tracks: list[TrackStatusItem] = Field(default_factory=list)
    error: str | None = None
    tracks_saved: int = Field(default=0, description="Track rows created or updated by this poll")
    provider: dict[str, Any] = Field(default_factory=dict, description="Raw provider payload")


class TrackResponse(BaseModel):
    """Stored track."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    index: int
    title: str
    audio_id: str | None = None
    audio_url: str | None = None
    expires_at: datetime | None = None


class GenerationResponse(BaseModel):
    """Stored generation with its tracks and covers."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    task_id: str
    prompt: str | None = None
    cover_task_id: str | None = None
    cover_images: list[str] | None = None
    tracks: list[TrackResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
