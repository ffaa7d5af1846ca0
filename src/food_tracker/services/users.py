"""User-related business logic."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from food_tracker.domain.dtos import UserDto, user_to_dto
from food_tracker.domain.errors import AuthenticationError, NotFoundError, require_text
from food_tracker.domain.users import (
    DEFAULT_SUGGESTED_CALORIES,
    DEFAULT_SUGGESTED_CARBS,
    DEFAULT_SUGGESTED_FAT,
    DEFAULT_SUGGESTED_PROTEIN,
    User,
)
from food_tracker.services.credentials import (
    CredentialVerifier,
    PlaintextCredentialVerifier,
)

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: UUID) -> User | None:
        """Return the user with the given id, if present."""

    def get_by_email(self, email: str) -> User | None:
        """Return the user with the given email, if present."""

    def get_by_username(self, name: str) -> User | None:
        """Return the user with the given display name, if present."""

    def get_all(self) -> list[User]:
        """Return every user."""

    def add(self, user: User) -> User:
        """Persist a new user and return it."""

    def update(self, user: User) -> User:
        """Persist changes to an existing user and return it."""

    def delete(self, user_id: UUID) -> None:
        """Delete a user by id."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    credentials: CredentialVerifier = field(default_factory=PlaintextCredentialVerifier)

    def create_user(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        password: str,
        suggested_calories: float = DEFAULT_SUGGESTED_CALORIES,
        suggested_carbs: float = DEFAULT_SUGGESTED_CARBS,
        suggested_fat: float = DEFAULT_SUGGESTED_FAT,
        suggested_protein: float = DEFAULT_SUGGESTED_PROTEIN,
    ) -> UserDto:
        """Register a new user."""
        require_text(password, "Password")
        user = User.create(
            name,
            email,
            self.credentials.protect(password),
            suggested_calories,
            suggested_carbs,
            suggested_fat,
            suggested_protein,
        )
        saved = self.repository.add(user)
        _logger.info("User created: id=%s", saved.id)
        return user_to_dto(saved)

    def update_user(  # noqa: PLR0913
        self,
        user_id: UUID,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
        suggested_calories: float | None = None,
        suggested_carbs: float | None = None,
        suggested_fat: float | None = None,
        suggested_protein: float | None = None,
    ) -> UserDto:
        """Apply the provided fields; empty strings and None are skipped."""
        user = self._require(user_id)
        if name:
            user.update_name(name)
        if email:
            user.update_email(email)
        if password:
            require_text(password, "Password")
            user.update_password(self.credentials.protect(password))
        goals = (suggested_calories, suggested_carbs, suggested_fat, suggested_protein)
        if any(goal is not None for goal in goals):
            user.update_nutritional_goals(
                _pick(suggested_calories, user.suggested_calories),
                _pick(suggested_carbs, user.suggested_carbs),
                _pick(suggested_fat, user.suggested_fat),
                _pick(suggested_protein, user.suggested_protein),
            )
        saved = self.repository.update(user)
        _logger.info("User updated: id=%s", saved.id)
        return user_to_dto(saved)

    def get_user(self, user_id: UUID) -> UserDto | None:
        """Return a user by id, if present."""
        user = self.repository.get_by_id(user_id)
        return user_to_dto(user) if user else None

    def get_user_by_username(self, username: str) -> UserDto | None:
        """Return a user by display name, if present."""
        user = self.repository.get_by_username(username)
        return user_to_dto(user) if user else None

    def get_all_users(self) -> list[UserDto]:
        return [user_to_dto(user) for user in self.repository.get_all()]

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user; their food logs are left to the caller."""
        self._require(user_id)
        self.repository.delete(user_id)
        _logger.info("User deleted: id=%s", user_id)

    def authenticate(self, email: str, password: str) -> UserDto:
        """Return the user whose email and password match."""
        user = self.repository.get_by_email(email)
        if user is None or not self.credentials.verify(password, user.password):
            _logger.info("Login rejected: email=%s", email)
            raise AuthenticationError("Invalid email or password")
        return user_to_dto(user)

    def _require(self, user_id: UUID) -> User:
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user


def _pick(value: float | None, current: float) -> float:
    return current if value is None else value
