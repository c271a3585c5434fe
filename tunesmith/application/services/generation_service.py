"""
Generation service.

Registers generation tasks accepted by the provider and reads back the
current generation for a task id.

Dependencies: tunesmith.boundary.db.CRUD
System role: Generation record orchestration
"""

from sqlalchemy.ext.asyncio import AsyncSession

from tunesmith.boundary.db.CRUD.generation_crud import generation_crud
from tunesmith.boundary.db.models.generation_model import GenerationModel
from tunesmith.core.exceptions import ValidationError


class GenerationService:
    """Generation record orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def register(self, task_id: str, prompt: str | None = None) -> GenerationModel:
        """
        Record a generation task accepted by the provider.

        Raises:
            ValidationError: task_id missing
        """
        task_id = (task_id or "").strip()
        if not task_id:
            raise ValidationError("taskId is required", field="taskId")
        generation = await generation_crud.create(self.db, task_id=task_id, prompt=prompt)
        await self.db.commit()
        return generation

    async def get_current(self, task_id: str) -> GenerationModel:
        """
        Return the most recent generation for a task id.

        Raises:
            ValueError: If no generation exists for task_id
        """
        generation = await generation_crud.get_latest_by_task_id(self.db, task_id)
        if generation is None:
            raise ValueError(f"Generation {task_id} does not exist")
        return generation
