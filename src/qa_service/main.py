# src/qa_service/main.py
"""Main entry point for the Q&A API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from qa_service import __version__
from qa_service.api.v1 import (
    answers_router,
    questions_router,
    search_router,
    users_router,
)
from qa_service.core.settings import get_settings
from qa_service.db.session import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the store handle at startup and release its pool at shutdown."""
    settings = get_settings()
    database = Database.from_url(settings.effective_database_url, echo=settings.sql_debug)
    app.state.database = database
    logger.info("Connected to %s database", database.engine.dialect.name)
    try:
        yield
    finally:
        logger.info("Shutting down; closing database pool")
        database.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application with all v1 routers mounted."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Questions, answers and comments with full-text search",
        version=__version__,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add GZip middleware for compression
    app.add_middleware(GZipMiddleware)

    # Include API routers
    app.include_router(search_router, prefix="/api/v1")
    app.include_router(questions_router, prefix="/api/v1")
    app.include_router(answers_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed ids, bodies and query strings as 400 Bad Request."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    return app


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run("qa_service.main:create_app", factory=True, host="0.0.0.0", port=3000, reload=settings.debug)


if __name__ == "__main__":
    run()
