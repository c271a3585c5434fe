"""
Track ORM model.

One generated audio unit of a generation, addressed by
(task_id, index). There is no unique constraint on that pair:
concurrent writers for the same position resolve as last-write-wins.

Dependencies: sqlalchemy, tunesmith.boundary.db.base
System role: Materialized per-track records
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tunesmith.boundary.db.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from tunesmith.boundary.db.models.generation_model import GenerationModel


class TrackModel(Base, UUIDMixin, TimestampMixin):
    """
    Track ORM model.

    Attributes:
        generation_id: Owning generation
        task_id: Provider task id (denormalized for lookup)
        audio_id: Provider track id, if reported
        title: Track title
        index: 1-based position within the generation
        audio_url: Media URL; a track is complete once this is set
        expires_at: End of the retention window for the media URL
    """

    __tablename__ = "tracks"
    __table_args__ = (Index("ix_tracks_task_id_index", "task_id", "index"),)

    generation_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("generations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    task_id: Mapped[str] = mapped_column(String(255), nullable=False)

    audio_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    title: Mapped[str] = mapped_column(String(500), nullable=False)

    index: Mapped[int] = mapped_column(Integer, nullable=False)

    audio_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    generation: Mapped["GenerationModel"] = relationship(back_populates="tracks")

    @property
    def is_complete(self) -> bool:
        """A track is complete once its media URL is known."""
        return self.audio_url is not None
