"""Tests for user service."""

from uuid import uuid4

import pytest

from food_tracker.adapters.in_memory_repositories import InMemoryUserRepository
from food_tracker.containers import AppContainer
from food_tracker.domain.errors import (
    AuthenticationError,
    NotFoundError,
    ValidationError,
)
from food_tracker.domain.users import DEFAULT_SUGGESTED_CALORIES
from food_tracker.services.users import UserService
from tests.conftest import PrefixCredentialVerifier


def test_create_user_protects_password(
    container: AppContainer, user_repository: InMemoryUserRepository
) -> None:
    created = container.user_service.create_user("Alice", "alice@example.com", "pw1234")

    stored = user_repository.get_by_id(created.id)
    assert stored is not None
    assert stored.password == "protected:pw1234"
    assert created.suggested_calories == DEFAULT_SUGGESTED_CALORIES
    assert not hasattr(created, "password")


def test_create_user_rejects_blank_password(container: AppContainer) -> None:
    with pytest.raises(ValidationError, match="Password cannot be empty"):
        container.user_service.create_user("Alice", "alice@example.com", "  ")


def test_default_service_stores_plaintext() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    created = service.create_user("Bob", "bob@example.com", "hunter22")

    stored = repository.get_by_id(created.id)
    assert stored is not None
    assert stored.password == "hunter22"
    assert service.authenticate("bob@example.com", "hunter22").id == created.id


def test_update_user_applies_only_given_fields(container: AppContainer) -> None:
    service = container.user_service
    created = service.create_user("Alice", "alice@example.com", "pw1234")

    updated = service.update_user(created.id, name="Alicia", suggested_fat=55)

    assert updated.name == "Alicia"
    assert updated.email == "alice@example.com"
    assert updated.suggested_fat == 55
    assert updated.suggested_calories == created.suggested_calories


def test_update_user_skips_empty_strings(container: AppContainer) -> None:
    service = container.user_service
    created = service.create_user("Alice", "alice@example.com", "pw1234")

    updated = service.update_user(created.id, name="", email="")

    assert updated.name == "Alice"
    assert updated.email == "alice@example.com"


def test_update_user_rejects_negative_goal(container: AppContainer) -> None:
    service = container.user_service
    created = service.create_user("Alice", "alice@example.com", "pw1234")

    with pytest.raises(ValidationError):
        service.update_user(created.id, suggested_calories=-10)

    fetched = service.get_user(created.id)
    assert fetched is not None
    assert fetched.suggested_calories == DEFAULT_SUGGESTED_CALORIES


def test_update_password_is_protected(
    container: AppContainer, credentials: PrefixCredentialVerifier
) -> None:
    service = container.user_service
    created = service.create_user("Alice", "alice@example.com", "pw1234")

    service.update_user(created.id, password="new-secret")

    assert service.authenticate("alice@example.com", "new-secret").id == created.id
    assert credentials.verified == ["new-secret"]


def test_update_unknown_user(container: AppContainer) -> None:
    with pytest.raises(NotFoundError):
        container.user_service.update_user(uuid4(), name="Ghost")


def test_lookup_by_username(container: AppContainer) -> None:
    service = container.user_service
    created = service.create_user("Alice", "alice@example.com", "pw1234")

    assert service.get_user_by_username("Alice") == created
    assert service.get_user_by_username("Nobody") is None
    assert service.get_all_users() == [created]


def test_authenticate_rejects_bad_credentials(container: AppContainer) -> None:
    service = container.user_service
    service.create_user("Alice", "alice@example.com", "pw1234")

    with pytest.raises(AuthenticationError):
        service.authenticate("alice@example.com", "wrong")
    with pytest.raises(AuthenticationError):
        service.authenticate("nobody@example.com", "pw1234")


def test_delete_user(container: AppContainer) -> None:
    service = container.user_service
    created = service.create_user("Alice", "alice@example.com", "pw1234")

    service.delete_user(created.id)

    assert service.get_user(created.id) is None
    with pytest.raises(NotFoundError):
        service.delete_user(created.id)
