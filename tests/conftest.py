"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from food_tracker.adapters.in_memory_repositories import (
    InMemoryFoodLogRepository,
    InMemoryFoodNutritionRepository,
    InMemoryUserRepository,
)
from food_tracker.config import Settings
from food_tracker.containers import AppContainer, Repositories, build_container_from
from food_tracker.domain.nutrition import FoodNutrition
from food_tracker.domain.users import User
from food_tracker.services.credentials import CredentialVerifier

LOG_DATE = datetime(2024, 5, 14, 8, 30, tzinfo=UTC)


@dataclass
class PrefixCredentialVerifier(CredentialVerifier):
    """Fake verifier that marks stored passwords so tests can spot them."""

    prefix: str = "protected:"
    verified: list[str] = field(default_factory=list)

    def protect(self, password: str) -> str:
        return f"{self.prefix}{password}"

    def verify(self, password: str, stored: str) -> bool:
        self.verified.append(password)
        return stored == f"{self.prefix}{password}"


def make_nutrition(  # noqa: PLR0913
    name: str = "Apple",
    measurement: str = "piece",
    carbs: float = 14.0,
    fat: float = 0.2,
    protein: float = 0.3,
    calories: float = 52.0,
) -> FoodNutrition:
    return FoodNutrition.create(name, measurement, carbs, fat, protein, calories)


def make_user(name: str = "Alice", email: str = "alice@example.com") -> User:
    return User.create(name, email, "secret-pass")


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", log_level="DEBUG", environment="test")


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def food_nutrition_repository() -> InMemoryFoodNutritionRepository:
    return InMemoryFoodNutritionRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def credentials() -> PrefixCredentialVerifier:
    return PrefixCredentialVerifier()


@pytest.fixture
def user(user_repository: InMemoryUserRepository) -> User:
    return user_repository.add(make_user())


@pytest.fixture
def apple(food_nutrition_repository: InMemoryFoodNutritionRepository) -> FoodNutrition:
    return food_nutrition_repository.add(make_nutrition())


@pytest.fixture
def banana(
    food_nutrition_repository: InMemoryFoodNutritionRepository,
) -> FoodNutrition:
    return food_nutrition_repository.add(
        make_nutrition(name="Banana", carbs=23.0, fat=0.3, protein=1.1, calories=89.0)
    )


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    food_nutrition_repository: InMemoryFoodNutritionRepository,
    food_log_repository: InMemoryFoodLogRepository,
    credentials: PrefixCredentialVerifier,
) -> AppContainer:
    repositories = Repositories(
        users=user_repository,
        food_nutrition=food_nutrition_repository,
        food_logs=food_log_repository,
        close=lambda: None,
    )
    return build_container_from(settings, repositories, credentials)

