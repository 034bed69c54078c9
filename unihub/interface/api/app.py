"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unihub.config import API_VERSION, Settings
from unihub.interface.api.errors import register_error_handlers
from unihub.interface.api.routes import doubts, events, health, notes, search
from unihub.util.di.container import (
    close_container_on_shutdown,
    create_container,
    setup_di,
)
from unihub.util.observability import instrument_fastapi

# Local frontends besides the configured one
DEV_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the UniHub API.

    Logfire must already be configured; scripts/start_app.py does this.

    Args:
        container: DI container to serve from; the production container if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="UniHub API",
        description="Doubts, answers, notes, events and search for a college community",
        version=API_VERSION,
        lifespan=close_container_on_shutdown,
    )

    instrument_fastapi(app_instance)

    # Browsers send the auth cookie cross-origin, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, *DEV_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    for module in (health, doubts, search, notes, events):
        app_instance.include_router(module.router)

    return app_instance
