"""Shared models and cross-cutting helpers for the backend."""

from roster_backend.shared.entities import NIL_USER_ID, User

__all__ = ["NIL_USER_ID", "User"]
