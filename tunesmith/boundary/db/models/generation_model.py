"""
Generation ORM model.

One row per generation request accepted by the provider. Several rows may
share a provider task id (re-submissions); the most recently created one is
the current generation for that task id.

Dependencies: sqlalchemy, tunesmith.boundary.db.base
System role: Job record owning tracks and cover images
"""

from typing import TYPE_CHECKING

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tunesmith.boundary.db.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from tunesmith.boundary.db.models.track_model import TrackModel


class GenerationModel(Base, UUIDMixin, TimestampMixin):
    """
    Generation ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        task_id: Provider task id (indexed, not unique)
        prompt: Prompt submitted with the request, if recorded
        cover_task_id: Cover sub-task id that produced cover_images
        cover_images: Saved cover filenames in the content directory
        tracks: Tracks materialized for this generation
        created_at: Request acceptance timestamp (UTC)
        updated_at: Last update timestamp (UTC)

    Write ownership:
        tracks are written only by the track reconciler; cover_task_id and
        cover_images only by the cover callback worker.
    """

    __tablename__ = "generations"

    task_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        doc="Provider task id",
    )

    prompt: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    cover_task_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        doc="Cover generation sub-task id",
    )

    cover_images: Mapped[list[str] | None] = mapped_column(
        JSON,
        nullable=True,
        doc="Cover image filenames",
    )

    tracks: Mapped[list["TrackModel"]] = relationship(
        back_populates="generation",
        cascade="all, delete-orphan",
        order_by="TrackModel.index",
        lazy="selectin",
    )
