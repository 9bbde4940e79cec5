"""Payloads shared by every endpoint."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Structured error payload."""

    error: str
