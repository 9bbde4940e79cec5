"""Unit tests for the user service."""

from uuid import UUID, uuid4

import pytest

from roster_backend.api.errors import NotFoundError, ValidationError
from roster_backend.api.services import (
    EMPTY_NAME_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    UserService,
)
from roster_backend.shared import NIL_USER_ID


@pytest.fixture
def service() -> UserService:
    return UserService()


def test_list_users_assigns_fresh_ids(service: UserService) -> None:
    first = service.list_users()
    second = service.list_users()

    assert len(first) == 2
    assert {user.id_ for user in first}.isdisjoint(user.id_ for user in second)


def test_list_users_skips_then_takes(service: UserService) -> None:
    users = service.list_users(limit=1, offset=1)

    assert [user.name for user in users] == ["Jane Smith"]


def test_get_user_keeps_requested_id(service: UserService) -> None:
    user_id = uuid4()

    user = service.get_user(user_id)

    assert user.id_ == user_id
    assert user.name == "John Doe"


def test_nil_sentinel_is_not_found(service: UserService) -> None:
    assert NIL_USER_ID == UUID("00000000-0000-0000-0000-000000000000")
    with pytest.raises(NotFoundError):
        service.get_user(NIL_USER_ID)
    with pytest.raises(NotFoundError):
        service.update_user(NIL_USER_ID, name="Johnny")
    with pytest.raises(NotFoundError):
        service.delete_user(NIL_USER_ID)


def test_create_user_validation_messages(service: UserService) -> None:
    with pytest.raises(ValidationError) as empty_name:
        service.create_user(name="", email="a@b.c")
    with pytest.raises(ValidationError) as bad_email:
        service.create_user(name="Ada", email="ada")

    assert empty_name.value.message == EMPTY_NAME_MESSAGE
    assert bad_email.value.message == INVALID_EMAIL_MESSAGE


def test_update_user_allows_empty_name(service: UserService) -> None:
    user = service.update_user(uuid4(), name="")

    assert user.name == ""
    assert user.email == "john@example.com"


def test_update_user_without_fields_returns_baseline(service: UserService) -> None:
    user_id = uuid4()

    user = service.update_user(user_id)

    assert (user.id_, user.name, user.email) == (
        user_id,
        "John Doe",
        "john@example.com",
    )
