"""Domain records shared between the service and API layers."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

NIL_USER_ID = UUID(int=0)


@dataclass(slots=True)
class User:
    """A user record fabricated for the duration of one request."""

    id_: UUID
    name: str
    email: str
