"""
Content storage configuration.

Settings for the local directory that holds saved audio and cover files.

Dependencies: pydantic_settings
System role: Artifact storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Settings for on-disk content storage."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONTENT_",
        case_sensitive=False,
        extra="ignore",
    )

    directory: str = Field(
        default="audio",
        description="Directory for saved track audio and cover images",
    )
    track_retention_days: int = Field(
        default=15,
        description="Days a ready track stays valid before downstream cleanup",
    )
    max_artifact_bytes: int | None = Field(
        default=20 * 1024 * 1024,
        description="Upper bound for a single downloaded artifact (None disables)",
    )
