"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio.config import Settings
from folio.interface.api.errors import register_error_handlers
from folio.interface.api.routes import health, posts, search, tags
from folio.util.di.container import create_container, setup_di
from folio.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Folio API",
        description="Content API for image posts with tags, listing and search",
        version=SERVICE_VERSION,
    )

    # Trace API requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=settings.cors.max_age,
    )

    register_error_handlers(app_instance)

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(search.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
