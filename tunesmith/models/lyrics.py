"""
Lyrics schemas.

Dependencies: pydantic
System role: Lyrics generation API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class GenerateLyricsRequest(BaseModel):
    """Request schema for lyrics generation."""

    prompt: str = Field(default="", description="Lyrics prompt, at most 200 words")


class GenerateLyricsResponse(BaseModel):
    """Provider task id of the accepted lyrics request."""

    model_config = ConfigDict(populate_by_name=True)

    task_id: str = Field(alias="taskId")


class TimestampedLyricsRequest(BaseModel):
    """Request schema for timestamped lyrics of a generated track."""

    model_config = ConfigDict(populate_by_name=True)

    task_id: str = Field(default="", alias="taskId")
    audio_id: str = Field(default="", alias="audioId")
