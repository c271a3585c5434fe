"""
Cover callback ingestion.

The provider gives webhook handlers 15 seconds before it retries, so the
work is split in two:

- ``accept`` (gate): parses the body, validates it and schedules the worker.
  It never awaits anything and always returns an acknowledgment.
- ``process`` (worker): resolves the cover sub-task to its parent
  generation, downloads every image, saves the files and records them on the
  generation. Any failure ends only that worker invocation.

Dependencies: pydantic, sqlalchemy, tunesmith.boundary, tunesmith.workers
System role: Sole writer of generation cover fields
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tunesmith.boundary.db.CRUD.generation_crud import generation_crud
from tunesmith.boundary.provider.kie_client import KieClient
from tunesmith.boundary.storage.artifact_fetcher import ArtifactFetcher
from tunesmith.boundary.storage.content_store import ContentStore
from tunesmith.core.exceptions import ArtifactFetchError
from tunesmith.core.filenames import cover_filename, is_safe_cover_filename
from tunesmith.models.callback import CallbackAck, CoverCallbackPayload
from tunesmith.observability.log_utils import log_exception_with_context, log_with_context
from tunesmith.workers.background import BackgroundWorkerPool

logger = logging.getLogger(__name__)


@dataclass
class CoverIngestResult:
    """Outcome of one worker run."""

    cover_task_id: str
    parent_task_id: str | None = None
    saved: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    updated: bool = False


def is_fetchable_url(url: Any) -> bool:
    """Non-empty string starting with ``http``."""
    return isinstance(url, str) and url.startswith("http")


class CoverCallbackService:
    """Gate and worker for cover generation callbacks."""

    def __init__(
        self,
        worker_pool: BackgroundWorkerPool,
        client: KieClient,
        fetcher: ArtifactFetcher,
        content_store: ContentStore,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        """
        Initialize cover callback service.

        Args:
            worker_pool: Pool that runs detached workers
            client: Provider API client (carries the credential)
            fetcher: Downloader for image URLs
            content_store: Destination for saved cover files
            session_factory: Factory for worker-owned database sessions
        """
        self.worker_pool = worker_pool
        self.client = client
        self.fetcher = fetcher
        self.content_store = content_store
        self.session_factory = session_factory

    def accept(self, raw_body: bytes | str) -> CallbackAck:
        """
        Validate a callback body and schedule processing.

        Malformed JSON, a non-200 ``code``, an empty image list or a missing
        ``taskId`` are acknowledged without further action.

        Args:
            raw_body: Raw request body

        Returns:
            CallbackAck: Always ``{"status": "received"}``
        """
        payload = self._parse(raw_body)
        if payload is None:
            return CallbackAck()

        data = payload.data
        if payload.code != 200 or data is None or not data.images or not data.task_id:
            log_with_context(
                logger,
                logging.INFO,
                "Ignoring cover callback",
                code=payload.code,
                task_id=data.task_id if data else None,
            )
            return CallbackAck()

        self.worker_pool.spawn(
            self.process(data.task_id, list(data.images)),
            name=f"cover-callback-{data.task_id}",
        )
        return CallbackAck()

    @staticmethod
    def _parse(raw_body: bytes | str) -> CoverCallbackPayload | None:
        try:
            body = json.loads(raw_body)
        except (ValueError, TypeError):
            logger.info("Ignoring cover callback with malformed JSON")
            return None
        if not isinstance(body, dict):
            return None
        try:
            return CoverCallbackPayload.model_validate(body)
        except PydanticValidationError:
            logger.info("Ignoring cover callback with unexpected shape")
            return None

    async def process(self, cover_task_id: str, images: Sequence[Any]) -> CoverIngestResult:
        """
        Resolve, download and record the images of one cover callback.

        Never raises: every failure is logged and ends this invocation.

        Args:
            cover_task_id: Cover sub-task id from the callback
            images: Image URLs in callback order

        Returns:
            CoverIngestResult: What was saved and whether the generation changed
        """
        result = CoverIngestResult(cover_task_id=cover_task_id)
        api_key = self.client.api_key
        if not api_key:
            logger.debug("Provider credential missing; dropping cover callback")
            return result

        try:
            parent_task_id = await self.client.get_cover_parent_task_id(cover_task_id)
            if not parent_task_id:
                log_with_context(
                    logger, logging.INFO, "Cover task has no parent task", cover_task_id=cover_task_id
                )
                return result
            result.parent_task_id = parent_task_id

            async with self.session_factory() as db:
                generation = await generation_crud.get_latest_by_task_id(db, parent_task_id)
                generation_id = generation.id if generation is not None else None
            if generation_id is None:
                log_with_context(
                    logger,
                    logging.INFO,
                    "No generation for cover parent task",
                    cover_task_id=cover_task_id,
                    parent_task_id=parent_task_id,
                )
                return result

            # Downloads run with no connection checked out.
            result.saved, result.skipped = await self.download_and_save(parent_task_id, images, api_key)
            if not result.saved:
                return result

            async with self.session_factory() as db:
                await generation_crud.update_cover(
                    db,
                    generation_id,
                    cover_task_id=cover_task_id,
                    cover_images=result.saved,
                )
                await db.commit()
            result.updated = True

            log_with_context(
                logger,
                logging.INFO,
                "Saved cover images",
                cover_task_id=cover_task_id,
                parent_task_id=parent_task_id,
                saved=len(result.saved),
                skipped=len(result.skipped),
            )
        except Exception as e:
            log_exception_with_context(
                logger,
                "Cover callback processing failed",
                e,
                cover_task_id=cover_task_id,
            )
        return result

    async def download_and_save(
        self,
        parent_task_id: str,
        images: Sequence[Any],
        api_key: str | None,
    ) -> tuple[list[str], list[str]]:
        """
        Download each image and save it under its derived filename.

        Items are independent: an invalid URL, an unsafe filename or a failed
        download skips that item only.

        Args:
            parent_task_id: Task id the filenames derive from
            images: Image URLs, 1-based position determines the filename
            api_key: Bearer credential for the downloads

        Returns:
            tuple[list[str], list[str]]: (saved filenames, skipped entries)
        """
        saved: list[str] = []
        skipped: list[str] = []
        for position, url in enumerate(images, start=1):
            if not is_fetchable_url(url):
                skipped.append(str(url))
                continue
            filename = cover_filename(parent_task_id, position)
            if not is_safe_cover_filename(filename):
                skipped.append(url)
                continue
            try:
                content = await self.fetcher.fetch(url, auth_token=api_key)
                await self.content_store.write(filename, content)
            except (ArtifactFetchError, OSError) as e:
                log_with_context(
                    logger,
                    logging.WARNING,
                    "Skipping cover image",
                    url=url,
                    cover_file=filename,
                    error=str(e),
                )
                skipped.append(url)
                continue
            saved.append(filename)

        return saved, skipped
