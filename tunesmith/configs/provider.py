"""
Provider API configuration settings.

Credentials and endpoints for the kie.ai music generation API.

Dependencies: pydantic_settings
System role: Outbound provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseSettings):
    """Settings for the kie.ai generation provider."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KIE_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Bearer credential for all provider calls",
    )
    base_url: str = Field(
        default="https://api.kie.ai/api/v1",
        description="Provider API base URL",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for provider requests and artifact downloads",
    )
    callback_url: str = Field(
        default="http://localhost:8000/api/v1/cover-callback",
        description="Public URL the provider posts completion callbacks to",
    )
