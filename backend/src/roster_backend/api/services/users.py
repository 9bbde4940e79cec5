"""User domain logic.

Records are fabricated on every call; nothing is stored between requests.
Replace the ``_fabricate_*`` helpers with repository calls once a database
backs the service.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from loguru import logger

from roster_backend.api.errors import NotFoundError, ValidationError
from roster_backend.shared import NIL_USER_ID, User

BASELINE_NAME = "John Doe"
BASELINE_EMAIL = "john@example.com"

EMPTY_NAME_MESSAGE = "Name cannot be empty"
INVALID_EMAIL_MESSAGE = "Invalid email format"


def _fabricate_directory() -> list[User]:
    return [
        User(id_=uuid4(), name=BASELINE_NAME, email=BASELINE_EMAIL),
        User(id_=uuid4(), name="Jane Smith", email="jane@example.com"),
    ]


def _fabricate_user(user_id: UUID) -> User:
    """Return the baseline record for *user_id* or raise for the sentinel."""
    if user_id == NIL_USER_ID:
        raise NotFoundError
    return User(id_=user_id, name=BASELINE_NAME, email=BASELINE_EMAIL)


def _validate_email(email: str) -> None:
    if "@" not in email:
        raise ValidationError(INVALID_EMAIL_MESSAGE)


class UserService:
    """Implements the user CRUD operations."""

    def list_users(self, *, limit: int = 10, offset: int = 0) -> list[User]:
        """Skip *offset* records, then return at most *limit* of the rest."""
        users = _fabricate_directory()
        return users[offset:][:limit]

    def get_user(self, user_id: UUID) -> User:
        return _fabricate_user(user_id)

    def create_user(self, *, name: str, email: str) -> User:
        """Validate the payload and return a record with a fresh identifier."""
        if not name:
            raise ValidationError(EMPTY_NAME_MESSAGE)
        _validate_email(email)

        user = User(id_=uuid4(), name=name, email=email)
        logger.info("Created user: {}", user.id_)
        return user

    def update_user(
        self,
        user_id: UUID,
        *,
        name: str | None = None,
        email: str | None = None,
    ) -> User:
        """Merge the supplied fields over the stored record."""
        user = _fabricate_user(user_id)
        if name is not None:
            user.name = name
        if email is not None:
            _validate_email(email)
            user.email = email

        logger.info("Updated user: {}", user.id_)
        return user

    def delete_user(self, user_id: UUID) -> None:
        _fabricate_user(user_id)
        logger.info("Deleted user: {}", user_id)
