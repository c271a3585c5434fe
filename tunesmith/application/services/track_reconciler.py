"""
Track reconciler.

Materializes provider track lists into TrackModel rows. Rows are addressed
by (task_id, index), so applying the same final payload any number of times
converges to the same set of rows; only expires_at moves forward.

Each position is committed on its own. A failing position is rolled back,
logged and skipped while the remaining positions still persist.

Dependencies: sqlalchemy, tunesmith.boundary.db.CRUD, tunesmith.core
System role: Sole writer of track rows
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tunesmith.boundary.db.CRUD.track_crud import track_crud
from tunesmith.boundary.db.models.generation_model import GenerationModel
from tunesmith.core.track_extractor import ExtractedTrack

logger = logging.getLogger(__name__)

DEFAULT_RETENTION_DAYS = 15


@dataclass
class ReconcileResult:
    """Positions touched by one reconcile call."""

    created: list[int] = field(default_factory=list)
    updated: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)

    @property
    def written(self) -> int:
        return len(self.created) + len(self.updated)


class TrackReconciler:
    """
    Idempotent upsert of track rows for one generation.

    Attributes:
        db: Async database session; committed once per position
        retention_days: Days added to "now" for each ready track's expires_at
    """

    def __init__(self, db: AsyncSession, retention_days: int = DEFAULT_RETENTION_DAYS) -> None:
        """
        Initialize track reconciler.

        Args:
            db: AsyncSession for database operations
            retention_days: Retention window for written tracks
        """
        self.db = db
        self.retention_days = retention_days

    async def reconcile(
        self,
        task_id: str,
        generation: GenerationModel | None,
        tracks: Sequence[ExtractedTrack],
    ) -> ReconcileResult:
        """
        Upsert one row per track position.

        A missing generation or an empty track list is a no-op: the generation
        may not be visible to this write path yet.

        Args:
            task_id: Provider task id
            generation: Current generation for task_id
            tracks: Extracted tracks of a final provider payload

        Returns:
            ReconcileResult: Created, updated and failed positions
        """
        result = ReconcileResult()
        if generation is None or not tracks:
            logger.debug(
                "Skipping track reconcile",
                extra={"task_id": task_id, "has_generation": generation is not None},
            )
            return result

        # Rollback expires loaded instances; keep the key as a plain value.
        generation_id = generation.id
        expires_at = datetime.now(timezone.utc) + timedelta(days=self.retention_days)

        for track in tracks:
            fields = {
                "audio_url": track.audio_url,
                "title": track.title,
                "audio_id": track.id,
                "expires_at": expires_at,
            }
            try:
                existing = await track_crud.get_by_task_id_and_index(self.db, task_id, track.position)
                if existing is not None:
                    await track_crud.update_by_id(self.db, existing.id, **fields)
                    result.updated.append(track.position)
                else:
                    await track_crud.create(
                        self.db,
                        generation_id=generation_id,
                        task_id=task_id,
                        index=track.position,
                        **fields,
                    )
                    result.created.append(track.position)
                await self.db.commit()
            except SQLAlchemyError as e:
                await self.db.rollback()
                result.failed.append(track.position)
                logger.exception(
                    "Failed to write track",
                    extra={"task_id": task_id, "position": track.position, "error": str(e)},
                )

        logger.info(
            "Reconciled tracks",
            extra={
                "task_id": task_id,
                "created": len(result.created),
                "updated": len(result.updated),
                "failed": len(result.failed),
            },
        )
        return result
