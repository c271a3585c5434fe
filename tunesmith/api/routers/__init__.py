"""API routers."""

from .content import router as content_router
from .cover_callback import router as cover_callback_router
from .generations import router as generations_router
from .health import router as health_router
from .lyrics import router as lyrics_router

__all__ = [
    "content_router",
    "cover_callback_router",
    "generations_router",
    "health_router",
    "lyrics_router",
]
