"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.v1 import router as v1_router
from src.config.settings import get_settings
from src.domain.error_log import ErrorLog

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Registration Validation API v1 - Validate user registrations with errors as values",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Loads settings on startup
    - Creates the application-owned error log
    - Reports recorded failures on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info(
        "Email lookup delay: %.3fs, duplicate marker: %r",
        settings.lookup_delay_seconds,
        settings.duplicate_marker,
    )

    app.state.error_log = ErrorLog()

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    logger.info("Recorded %d failures during this run", len(app.state.error_log))


app = FastAPI(
    title="registration-results",
    description="Registration Validation API - Demonstrates errors as values instead of exceptions",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint. Returns 200 OK while the application is running."""
    return {"status": "healthy"}
