"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tube.config import Settings
from tube.interface.api.errors import register_error_handlers
from tube.interface.api.routes import comments, health, likes, tweets, videos
from tube.util.di.container import create_container, setup_di
from tube.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py.

    Args:
        container: DI container to use; the production container is built
            when omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Tube API",
        description="Backend API for Tube - share videos, comment, post tweets and like content",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(videos.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(tweets.router)

    return app_instance
