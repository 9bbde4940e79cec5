"""Models used for API request and response payloads."""

from roster_backend.api.models.common import ErrorResponse
from roster_backend.api.models.user import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
