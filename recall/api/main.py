"""
Recall HTTP API.

Builds the FastAPI app: document upload/status/chat routers under /api,
CORS for the configured frontend origins, and correlation/request logging.

Dependencies: fastapi, uvicorn, recall.api.routers
System role: API entry point with router assembly and server launch

Usage:
    uvicorn recall.api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recall.api.deps.dependencies import get_service_cache
from recall.configs import get_settings
from recall.observability import configure_logging
from recall.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import chat_router, documents_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the document store before serving; close store and Gen AI client on exit."""
    cache = get_service_cache()
    store = cache.document_store
    upload_dir = cache.temp_storage.base_dir
    logger.info(
        f"{__name__}:lifespan - API ready",
        extra={"store": type(store).__name__, "upload_dir": str(upload_dir)},
    )

    yield

    await cache.close()
    logger.info(f"{__name__}:lifespan - Store and Gen AI client closed")


def create_app() -> FastAPI:
    """
    Create the FastAPI application.

    Returns:
        FastAPI: App with health, document and chat routers under /api
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Recall API",
        description="Upload PDFs and ask questions about them",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    # Last added runs first: the correlation id is bound before the request is logged
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    for router in (health_router, documents_router, chat_router):
        app.include_router(router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("recall.api.main:app", host=settings.api_host, port=settings.api_port)
