"""Detached background work."""

from tunesmith.workers.background import BackgroundWorkerPool

__all__ = ["BackgroundWorkerPool"]
