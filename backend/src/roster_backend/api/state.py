"""Per-application context handed to request handlers."""

from __future__ import annotations

from dataclasses import dataclass, field

from roster_backend.api.services import UserService
from roster_backend.settings import BackendSettings  # noqa: TC001


@dataclass(frozen=True, slots=True)
class AppState:
    """Immutable context shared by every request of one application.

    Holds configuration and the services built from it. Database handles
    belong here once the service stops fabricating its records.
    """

    settings: BackendSettings
    users: UserService = field(default_factory=UserService)
