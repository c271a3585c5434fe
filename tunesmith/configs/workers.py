"""
Background work and polling configuration.

Dependencies: pydantic_settings
System role: Scheduling configuration for poll loops and callback workers
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkerSettings(BaseSettings):
    """Settings for the poll loop and detached callback workers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WORKER_",
        case_sensitive=False,
        extra="ignore",
    )

    poll_interval_seconds: float = Field(
        default=8.0,
        description="Seconds between status polls for a single job",
    )
    shutdown_drain_timeout: float = Field(
        default=30.0,
        description="Seconds to wait for in-flight callback workers on shutdown",
    )
