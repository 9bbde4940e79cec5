"""Route definitions for public HTTP endpoints."""

from roster_backend.api.routers.health import router as health_router
from roster_backend.api.routers.users import router as users_router

__all__ = ["health_router", "users_router"]
