"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fritter.config import Settings
from fritter.interface.api.routes import (
    engagement,
    freets,
    health,
    profiles,
    reflections,
    users,
)
from fritter.util.di.container import create_container, setup_di
from fritter.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted (tests pass one with in-memory persistence)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Fritter API",
        description="Backend API for Fritter - short posts, profiles, likes and controversy",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(freets.router)
    app_instance.include_router(engagement.router)
    app_instance.include_router(profiles.router)
    app_instance.include_router(reflections.router)
    app_instance.include_router(users.router)

    return app_instance
