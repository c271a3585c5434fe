"""
Track CRUD operations.

Dependencies: sqlalchemy, tunesmith.boundary.db.models
System role: Track persistence operations for the reconciler
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tunesmith.boundary.db.CRUD.base_crud import BaseCRUD
from tunesmith.boundary.db.models.track_model import TrackModel


class TrackCRUD(BaseCRUD[TrackModel]):
    """CRUD operations for TrackModel."""

    def __init__(self) -> None:
        """Initialize TrackCRUD with TrackModel."""
        super().__init__(TrackModel)

    async def get_by_task_id_and_index(
        self,
        session: AsyncSession,
        task_id: str,
        index: int,
    ) -> TrackModel | None:
        """
        Retrieve the track at a position of a provider task.

        Args:
            session: Async database session
            task_id: Provider task id
            index: 1-based track position

        Returns:
            TrackModel if found, None otherwise
        """
        return await self.get_latest(session, TrackModel.task_id == task_id, TrackModel.index == index)

    async def get_by_task_id(
        self,
        session: AsyncSession,
        task_id: str,
    ) -> Sequence[TrackModel]:
        """
        Retrieve all tracks of a provider task ordered by position.

        Args:
            session: Async database session
            task_id: Provider task id

        Returns:
            Sequence of TrackModels
        """
        stmt = (
            select(TrackModel)
            .where(TrackModel.task_id == task_id)
            .order_by(TrackModel.index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


track_crud = TrackCRUD()
