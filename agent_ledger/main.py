"""
Agent Ledger - Main Application Entry Point
===========================================

This module initializes the FastAPI application with its routes,
middleware and lifecycle handlers.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from fastapi import FastAPI
from starlette.responses import RedirectResponse

from agent_ledger import __version__
from agent_ledger.api.v1.router import api_router
from agent_ledger.core.config import settings
from agent_ledger.core.database import engine, create_db_and_tables
from agent_ledger.core.logging import configure_logging
from agent_ledger.middleware.request_id import RequestIdMiddleware
from agent_ledger.middleware.request_logger import RequestLoggerMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    - Startup: create tables (outside tests)
    - Shutdown: dispose of the engine's connections
    """
    if settings.APP_ENV != "test":
        try:
            await create_db_and_tables()
        except Exception as e:
            logger.warning(f"Could not create database tables: {e} - continuing without database")

    yield

    if settings.APP_ENV != "test":
        await engine.dispose()


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured application instance
    """
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Workspace-scoped agent event history",
        version=__version__,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # ---------------------------------------------------------------------------
    # Middleware (order matters - first added = last executed)
    # ---------------------------------------------------------------------------

    app.add_middleware(RequestLoggerMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # ---------------------------------------------------------------------------
    # Routes
    # ---------------------------------------------------------------------------

    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Health check endpoint for container orchestration.

        Returns:
            dict: Health status with application name
        """
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/", include_in_schema=False)
    async def root_redirect():
        return RedirectResponse(url="/docs")

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


# Create application instance
app = create_application()
