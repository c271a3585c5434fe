"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - GenerationModel, TrackModel: Core domain entities
  - generation_crud, track_crud: CRUD operation singletons

Dependencies: sqlalchemy, tunesmith.configs
System role: Persistent store for generations and their tracks
"""

from tunesmith.boundary.db.base import Base, TimestampMixin, UUIDMixin
from tunesmith.boundary.db.connection import (
    create_tables,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from tunesmith.boundary.db.models import GenerationModel, TrackModel
from tunesmith.boundary.db.CRUD import (
    BaseCRUD,
    GenerationCRUD,
    TrackCRUD,
    generation_crud,
    track_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "create_tables",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "GenerationModel",
    "TrackModel",
    # CRUD classes
    "BaseCRUD",
    "GenerationCRUD",
    "TrackCRUD",
    # CRUD singletons
    "generation_crud",
    "track_crud",
]
