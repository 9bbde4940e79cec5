"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from roster_backend.api.services import UserService  # noqa: TC001
from roster_backend.api.state import AppState


def get_app_state(request: Request) -> AppState:
    """Return the :class:`AppState` attached by :func:`create_api`."""

    return request.app.state.context


def get_user_service(
    state: Annotated[AppState, Depends(get_app_state)],
) -> UserService:
    """Return the :class:`UserService` owned by the application state."""

    return state.users


UserServiceDep = Annotated[UserService, Depends(get_user_service)]

__all__ = ["UserServiceDep", "get_app_state", "get_user_service"]
