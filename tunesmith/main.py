"""
Tunesmith HTTP application.

Builds the FastAPI app: observability middleware, the ``/api/v1`` routes and
the worker pool that runs cover callback processing after the webhook has
been acknowledged.

Dependencies: fastapi, uvicorn, tunesmith.api, tunesmith.observability, tunesmith.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tunesmith.configs import get_settings
from tunesmith.api import api_router
from tunesmith.boundary.db import create_tables
from tunesmith.boundary.storage.content_store import ContentStore
from tunesmith.observability.logger import configure_logging
from tunesmith.observability.middleware import (
    RequestLoggingMiddleware,
    CorrelationMiddleware,
)
from tunesmith.workers import BackgroundWorkerPool

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: logging, missing tables, content directory.
    Shutdown: wait (bounded) for in-flight cover workers.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        await create_tables()
        content_dir = ContentStore(settings.storage.directory).ensure_directory()
    except Exception as e:
        logger.exception("Startup failed", extra={"error": str(e)})
        raise
    logger.info(
        "Tunesmith started",
        extra={"environment": settings.environment, "content_dir": str(content_dir)},
    )

    yield

    cancelled = await app.state.worker_pool.drain(settings.workers.shutdown_drain_timeout)
    logger.info("Tunesmith stopped", extra={"cancelled_workers": cancelled})


def create_app() -> FastAPI:
    """
    Build the application.

    The worker pool lives on ``app.state`` so request handlers can schedule
    work that outlives the request.
    """
    app = FastAPI(
        title="Tunesmith API",
        description="Music generation status polling, track reconciliation and cover callbacks",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.worker_pool = BackgroundWorkerPool(name="cover-callbacks")

    # Added first = runs last
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Browser clients poll the status endpoint directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("tunesmith.main:app", host="0.0.0.0", port=8082)
