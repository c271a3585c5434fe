"""
Tunesmith: music generation integration service.

Reconciles provider polling and webhook callbacks into a single view of
each generation job and persists derived tracks and cover art.
"""

__version__ = "0.1.0"
