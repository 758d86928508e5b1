"""
School Management API - Main Application Entry Point

This module builds and configures the FastAPI application including:
- Settings, database engine and token service, held on ``app.state``
- CORS middleware
- JSON error envelope handlers
- API routing
- Health check endpoints
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.api import api_router, legacy_router
from app.core.config import Settings, get_settings
from app.core.database import (
    close_db,
    create_engine_from_settings,
    create_session_maker,
    init_db,
)
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.core.security import TokenService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Creates missing tables when DATABASE_AUTO_CREATE is enabled and disposes
    of the engine on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting School Management API in {settings.python_env} mode")

    if settings.database_auto_create:
        try:
            await init_db(app.state.engine)
        except Exception:
            logger.exception("Database initialisation failed")
            if settings.is_production:
                raise

    yield

    logger.info("Shutting down School Management API")
    await close_db(app.state.engine)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration to use; read from the environment when omitted.
            Reading fails if JWT_SECRET_KEY is missing, so a misconfigured
            deployment never starts.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="School Management API",
        description="School management system with JWT authentication",
        version="0.1.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    engine = create_engine_from_settings(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    app.state.token_service = TokenService(
        settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        lifetime=timedelta(hours=settings.access_token_expire_hours),
    )

    register_exception_handlers(app)

    app.include_router(api_router)
    app.include_router(legacy_router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, str]:
        """Root endpoint - API welcome message."""
        return {
            "message": "School Management API",
            "status": "running",
            "environment": settings.python_env,
        }

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {"status": "healthy"}

    @app.get("/ready", tags=["Health"])
    async def readiness_check(request: Request) -> dict[str, str]:
        """Readiness check endpoint; verifies the database answers."""
        async with request.app.state.session_maker() as session:
            await session.execute(text("SELECT 1"))
        return {"status": "ready"}

    return app


app = create_app()
