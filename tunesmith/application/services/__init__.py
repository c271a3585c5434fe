"""Service orchestrators."""

from .cover_callback_service import CoverCallbackService, CoverIngestResult
from .generation_service import GenerationService
from .lyrics_service import LyricsService
from .status_service import StatusService
from .track_reconciler import ReconcileResult, TrackReconciler

__all__ = [
    "CoverCallbackService",
    "CoverIngestResult",
    "GenerationService",
    "LyricsService",
    "ReconcileResult",
    "StatusService",
    "TrackReconciler",
]
