"""
Generic async CRUD for timestamped models.

Rows here are never deleted by the application and lookups by business key
(task id, position) tolerate duplicates by picking the newest row, so the
base class offers create, primary-key access and "latest matching row".

Dependencies: sqlalchemy
System role: Foundation for model-specific CRUD classes
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tunesmith.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Async CRUD operations bound to one model class.

    Methods flush but never commit; the caller owns the transaction.

    Attributes:
        model: Mapped class operated on (must carry ``id`` and ``created_at``)
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **fields: Any) -> ModelT:
        """
        Insert a row and return it with generated id and timestamps loaded.

        Args:
            session: Async database session
            **fields: Column values

        Returns:
            ModelT: Persisted (flushed, uncommitted) instance
        """
        instance = self.model(**fields)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """Row with primary key ``id``, or None."""
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_latest(self, session: AsyncSession, *criteria: ColumnElement[bool]) -> ModelT | None:
        """
        Newest row (by ``created_at``) matching all ``criteria``.

        Args:
            session: Async database session
            *criteria: SQLAlchemy boolean expressions

        Returns:
            ModelT | None: Most recently created match
        """
        stmt = (
            select(self.model)
            .where(*criteria)
            .order_by(self.model.created_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def update_by_id(self, session: AsyncSession, id: UUID, **fields: Any) -> ModelT | None:
        """
        Apply ``fields`` to one row in a single UPDATE ... RETURNING.

        Loaded instances of the row in ``session`` see the new values.

        Returns:
            ModelT | None: Updated row, or None when ``id`` does not exist
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**fields)
            .returning(self.model)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()
