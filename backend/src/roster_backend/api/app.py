"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster_backend.api.errors import register_error_handlers
from roster_backend.api.middleware import RequestTracingMiddleware
from roster_backend.api.routers import health_router, users_router
from roster_backend.api.state import AppState
from roster_backend.logging_config import configure_logging
from roster_backend.settings import BackendSettings, get_settings


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()
    configure_logging(config.log_level)
    app = FastAPI(title="Roster API")
    app.state.context = AppState(settings=config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTracingMiddleware)
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(users_router)
    return app
