"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: tunesmith.configs, tunesmith.application, tunesmith.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tunesmith.application.services import (
    CoverCallbackService,
    GenerationService,
    LyricsService,
    StatusService,
)
from tunesmith.boundary.db import get_async_db, get_async_session_factory
from tunesmith.boundary.provider.kie_client import KieClient
from tunesmith.boundary.storage.artifact_fetcher import ArtifactFetcher
from tunesmith.boundary.storage.content_store import ContentStore
from tunesmith.configs import Settings, get_settings
from tunesmith.workers.background import BackgroundWorkerPool


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_kie_client(settings: Settings = Depends(get_settings_dependency)) -> KieClient:
    """
    Get provider API client.

    Args:
        settings: Application settings (injected via Depends)

    Returns:
        KieClient: Client carrying the configured credential (may be None)
    """
    return KieClient(
        api_key=settings.provider.api_key,
        base_url=settings.provider.base_url,
        timeout=settings.provider.request_timeout,
    )


def get_content_store(settings: Settings = Depends(get_settings_dependency)) -> ContentStore:
    """Get content directory store."""
    return ContentStore(settings.storage.directory)


def get_artifact_fetcher(settings: Settings = Depends(get_settings_dependency)) -> ArtifactFetcher:
    """Get artifact downloader."""
    return ArtifactFetcher(
        timeout=settings.provider.request_timeout,
        max_bytes=settings.storage.max_artifact_bytes,
    )


def get_worker_pool(request: Request) -> BackgroundWorkerPool:
    """Get the application-wide background worker pool."""
    return request.app.state.worker_pool


def get_status_service(
    db: AsyncSession = Depends(get_async_db),
    client: KieClient = Depends(get_kie_client),
    settings: Settings = Depends(get_settings_dependency),
) -> StatusService:
    """
    Get status service instance.

    Args:
        db: Async database session (injected via Depends)
        client: Provider client (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        StatusService: Status service instance
    """
    return StatusService(
        db=db,
        client=client,
        retention_days=settings.storage.track_retention_days,
    )


def get_cover_callback_service(
    worker_pool: BackgroundWorkerPool = Depends(get_worker_pool),
    client: KieClient = Depends(get_kie_client),
    fetcher: ArtifactFetcher = Depends(get_artifact_fetcher),
    content_store: ContentStore = Depends(get_content_store),
) -> CoverCallbackService:
    """
    Get cover callback service instance.

    Workers outlive the request, so the service gets a session factory
    rather than the request-scoped session.
    """
    return CoverCallbackService(
        worker_pool=worker_pool,
        client=client,
        fetcher=fetcher,
        content_store=content_store,
        session_factory=get_async_session_factory(),
    )


def get_lyrics_service(
    client: KieClient = Depends(get_kie_client),
    settings: Settings = Depends(get_settings_dependency),
) -> LyricsService:
    """Get lyrics service instance."""
    return LyricsService(client=client, callback_url=settings.provider.callback_url)


def get_generation_service(db: AsyncSession = Depends(get_async_db)) -> GenerationService:
    """Get generation service instance."""
    return GenerationService(db=db)
