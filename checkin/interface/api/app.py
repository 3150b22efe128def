"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from checkin.config import Settings
from checkin.interface.api.middleware import ApiLogMiddleware
from checkin.interface.api.responses import register_exception_handlers
from checkin.interface.api.routes import health, status_tags
from checkin.util.di.container import create_container, setup_di
from checkin.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings, loaded from environment when None
        container: DI container, the production container when None
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Check-in API",
        description="Backend API for tagging statuses with key/value metadata",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "User-Agent"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Added last so it wraps CORS and sees every response
    if settings.api_log.enabled:
        app_instance.add_middleware(ApiLogMiddleware)

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(status_tags.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
