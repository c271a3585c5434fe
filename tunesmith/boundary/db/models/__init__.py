"""ORM models."""

from tunesmith.boundary.db.models.generation_model import GenerationModel
from tunesmith.boundary.db.models.track_model import TrackModel

__all__ = ["GenerationModel", "TrackModel"]
