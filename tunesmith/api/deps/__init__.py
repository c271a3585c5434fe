"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_artifact_fetcher,
    get_content_store,
    get_cover_callback_service,
    get_generation_service,
    get_kie_client,
    get_lyrics_service,
    get_settings_dependency,
    get_status_service,
    get_worker_pool,
)

__all__ = [
    "get_artifact_fetcher",
    "get_content_store",
    "get_cover_callback_service",
    "get_generation_service",
    "get_kie_client",
    "get_lyrics_service",
    "get_settings_dependency",
    "get_status_service",
    "get_worker_pool",
]
