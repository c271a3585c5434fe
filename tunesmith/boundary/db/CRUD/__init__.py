"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from tunesmith.boundary.db.CRUD import generation_crud, track_crud

    generation = await generation_crud.get_latest_by_task_id(db, task_id)
"""

from tunesmith.boundary.db.CRUD.base_crud import BaseCRUD
from tunesmith.boundary.db.CRUD.generation_crud import GenerationCRUD, generation_crud
from tunesmith.boundary.db.CRUD.track_crud import TrackCRUD, track_crud

__all__ = [
    "BaseCRUD",
    "GenerationCRUD",
    "generation_crud",
    "TrackCRUD",
    "track_crud",
]
