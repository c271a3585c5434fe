"""
Generation CRUD operations.

Adds the provider-task-id lookups and the single cover write used by the
callback worker.

Dependencies: sqlalchemy, tunesmith.boundary.db.models
System role: Generation persistence operations
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tunesmith.boundary.db.CRUD.base_crud import BaseCRUD
from tunesmith.boundary.db.models.generation_model import GenerationModel


class GenerationCRUD(BaseCRUD[GenerationModel]):
    """CRUD operations for GenerationModel."""

    def __init__(self) -> None:
        """Initialize GenerationCRUD with GenerationModel."""
        super().__init__(GenerationModel)

    async def get_latest_by_task_id(
        self,
        session: AsyncSession,
        task_id: str,
    ) -> GenerationModel | None:
        """
        Retrieve the current generation for a provider task id.

        When several rows share the task id the most recently created wins.

        Args:
            session: Async database session
            task_id: Provider task id

        Returns:
            GenerationModel if found, None otherwise
        """
        return await self.get_latest(session, GenerationModel.task_id == task_id)

    async def update_cover(
        self,
        session: AsyncSession,
        id: UUID,
        cover_task_id: str,
        cover_images: list[str],
    ) -> GenerationModel | None:
        """
        Record a cover batch on a generation in a single write.

        Args:
            session: Async database session
            id: Generation UUID
            cover_task_id: Cover sub-task id that produced the images
            cover_images: Saved cover filenames

        Returns:
            Updated GenerationModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            id,
            cover_task_id=cover_task_id,
            cover_images=list(cover_images),
        )


generation_crud = GenerationCRUD()
