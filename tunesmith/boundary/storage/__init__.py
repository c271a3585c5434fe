"""Artifact download and content directory storage."""

from tunesmith.boundary.storage.artifact_fetcher import ArtifactFetcher
from tunesmith.boundary.storage.content_store import ContentStore

__all__ = ["ArtifactFetcher", "ContentStore"]
