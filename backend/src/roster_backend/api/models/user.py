"""Pydantic models for user endpoints."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Public representation of a user record."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    name: str
    email: str


class UserCreateRequest(BaseModel):
    """Payload for creating a new user."""

    name: str
    email: str


class UserUpdateRequest(BaseModel):
    """Payload for a partial update; omitted fields keep their current value."""

    name: str | None = None
    email: str | None = None
