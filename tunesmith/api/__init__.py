"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    content_router,
    cover_callback_router,
    generations_router,
    health_router,
    lyrics_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(generations_router)
api_router.include_router(cover_callback_router)
api_router.include_router(lyrics_router)
api_router.include_router(content_router)

__all__ = ["api_router"]
