"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, newsbot.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsbot.api.deps.dependencies import get_service_cache
from newsbot.boundary.db import create_all_tables
from newsbot.configs import get_settings
from newsbot.observability import configure_logging
from newsbot.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    articles_router,
    chat_router,
    chat_stream_router,
    health_router,
    sessions_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    configure_logging(get_settings().log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    await create_all_tables()
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    # Provider clients stay lazy so the API boots without credentials
    _ = cache.session_log
    _ = cache.fanout
    _ = cache.corpus
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="NewsBot RAG API",
        description="Conversational Q&A grounded in a news article corpus",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(articles_router, prefix="/api/v1")
    app.include_router(chat_stream_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    api_config = get_settings().api
    uvicorn.run(
        "newsbot.api.main:app",
        host=api_config.host,
        port=api_config.port,
    )
