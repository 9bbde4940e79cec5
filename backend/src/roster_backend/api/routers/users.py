"""User CRUD endpoints."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from roster_backend.api.dependencies import UserServiceDep  # noqa: TC001
from roster_backend.api.models import (
    ErrorResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

MAX_PAGE_VALUE = 2**32 - 1

router = APIRouter(prefix="/api/users", tags=["users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get("", response_model=list[UserResponse])
def list_users(
    service: UserServiceDep,
    limit: Annotated[int, Query(ge=0, le=MAX_PAGE_VALUE)] = 10,
    offset: Annotated[int, Query(ge=0, le=MAX_PAGE_VALUE)] = 0,
) -> list[UserResponse]:
    """Return a page of users."""

    users = service.list_users(limit=limit, offset=offset)
    return [UserResponse.model_validate(user, from_attributes=True) for user in users]


@router.post("", response_model=UserResponse, responses=_INVALID)
def create_user(payload: UserCreateRequest, service: UserServiceDep) -> UserResponse:
    """Create a user from the submitted name and email."""

    user = service.create_user(name=payload.name, email=payload.email)
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
def get_user(user_id: UUID, service: UserServiceDep) -> UserResponse:
    user = service.get_user(user_id)
    return UserResponse.model_validate(user, from_attributes=True)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_NOT_FOUND, **_INVALID},
)
def update_user(
    user_id: UUID, payload: UserUpdateRequest, service: UserServiceDep
) -> UserResponse:
    """Apply a partial update to a user."""

    user = service.update_user(user_id, name=payload.name, email=payload.email)
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_user(user_id: UUID, service: UserServiceDep) -> Response:
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
