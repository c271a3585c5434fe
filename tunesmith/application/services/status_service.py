"""
Generation status service.

Serves one status poll: asks the provider for the task record, normalizes
the status, extracts the track list and, once the job succeeded with at
least one track, hands the tracks to the TrackReconciler.

Dependencies: tunesmith.boundary, tunesmith.core, tunesmith.application
System role: Poll-path orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from tunesmith.application.services.track_reconciler import DEFAULT_RETENTION_DAYS, TrackReconciler
from tunesmith.boundary.db.CRUD.generation_crud import generation_crud
from tunesmith.boundary.provider.kie_client import KieClient
from tunesmith.core.exceptions import ConfigurationError, ValidationError
from tunesmith.core.status_normalizer import JobState, is_final, normalize_status
from tunesmith.core.track_extractor import extract_error_message, extract_status_token, extract_tracks
from tunesmith.models.generation import GenerationStatusResponse, TrackStatusItem

logger = logging.getLogger(__name__)


class StatusService:
    """Status polling orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        client: KieClient,
        retention_days: int = DEFAULT_RETENTION_DAYS,
    ) -> None:
        """
        Initialize status service.

        Args:
            db: AsyncSession for database operations
            client: Provider API client
            retention_days: Retention window passed to the reconciler
        """
        self.db = db
        self.client = client
        self.reconciler = TrackReconciler(db, retention_days=retention_days)

    async def get_status(self, task_id: str | None) -> GenerationStatusResponse:
        """
        Poll the provider once and persist tracks of a successful job.

        Args:
            task_id: Provider task id

        Returns:
            GenerationStatusResponse: Normalized status and extracted tracks

        Raises:
            ConfigurationError: Provider credential missing
            ValidationError: task_id missing
            ProviderError: Provider answered with an error
            ProviderTransportError: Provider unreachable
        """
        if not self.client.api_key:
            raise ConfigurationError("KIE_API_KEY")
        task_id = (task_id or "").strip()
        if not task_id:
            raise ValidationError("taskId is required", field="taskId")

        response = await self.client.get_generation_record(task_id)
        response.raise_for_error()
        body = response.body

        raw_status = extract_status_token(body)
        tracks = extract_tracks(body)
        state = normalize_status(raw_status, tracks)

        tracks_saved = 0
        if state is JobState.SUCCESS and tracks:
            generation = await generation_crud.get_latest_by_task_id(self.db, task_id)
            result = await self.reconciler.reconcile(task_id, generation, tracks)
            tracks_saved = result.written
        elif state is JobState.FAILED:
            logger.info(
                "Generation failed at provider",
                extra={"task_id": task_id, "raw_status": str(raw_status)},
            )

        return GenerationStatusResponse(
            task_id=task_id,
            status=state.value,
            raw_status=str(raw_status) if raw_status is not None else None,
            is_final=is_final(state),
            tracks=[
                TrackStatusItem(
                    id=track.id,
                    position=track.position,
                    title=track.title,
                    audio_url=track.audio_url,
                    status=track.status,
                )
                for track in tracks
            ],
            error=None if state is JobState.SUCCESS else extract_error_message(body),
            tracks_saved=tracks_saved,
            provider=body,
        )
