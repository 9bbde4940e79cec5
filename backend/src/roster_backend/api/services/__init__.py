"""Service layer for API-specific business logic."""

from roster_backend.api.services.users import (
    EMPTY_NAME_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    UserService,
)

__all__ = [
    "EMPTY_NAME_MESSAGE",
    "INVALID_EMAIL_MESSAGE",
    "UserService",
]
