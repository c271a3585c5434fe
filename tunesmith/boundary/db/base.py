"""
ORM foundation: declarative base plus id and timestamp mixins.

Timestamps are timezone-aware UTC. ``created_at`` orders rows that share a
business key (several generations per provider task id), so it is set by
the application at insert time rather than by the database clock.

Dependencies: sqlalchemy
System role: Shared column definitions for generations and tracks
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Metadata registry for every Tunesmith table."""

    pass


class UUIDMixin:
    """
    Random UUID primary key.

    Native UUID on PostgreSQL, CHAR(32) on SQLite.
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )


class TimestampMixin:
    """
    Insert and last-update times.

    Attributes:
        created_at: Set once on insert; "latest row" lookups order by it
        updated_at: Refreshed by every ORM update
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )
