"""Tests for food log service."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from food_tracker.adapters.in_memory_repositories import InMemoryFoodLogRepository
from food_tracker.containers import AppContainer
from food_tracker.domain.dtos import FoodLogDto
from food_tracker.domain.errors import NotFoundError, ValidationError
from food_tracker.domain.nutrition import FoodNutrition
from food_tracker.domain.users import User
from food_tracker.services.food_logs import CreateFoodLogCommand, FoodItemInput
from tests.conftest import LOG_DATE


def _create(
    container: AppContainer, user: User, *items: tuple[FoodNutrition, int]
) -> FoodLogDto:
    return container.food_log_service.create_food_log(
        CreateFoodLogCommand(
            date_time=LOG_DATE,
            user_id=user.id,
            food_items=[FoodItemInput(food.id, unit) for food, unit in items],
        )
    )


def test_create_food_log_totals_items(
    container: AppContainer, user: User, apple: FoodNutrition, banana: FoodNutrition
) -> None:
    created = _create(container, user, (apple, 2), (banana, 1))

    assert created.total_calories == 193
    assert [item.food_name for item in created.food_items] == ["Apple", "Banana"]
    assert created.food_items[0].calories == 104
    assert created.user_id == user.id


def test_create_food_log_with_unknown_nutrition_persists_nothing(
    container: AppContainer,
    food_log_repository: InMemoryFoodLogRepository,
    user: User,
    apple: FoodNutrition,
) -> None:
    command = CreateFoodLogCommand(
        date_time=LOG_DATE,
        user_id=user.id,
        food_items=[FoodItemInput(apple.id, 1), FoodItemInput(uuid4(), 1)],
    )

    with pytest.raises(NotFoundError, match="FoodNutrition"):
        container.food_log_service.create_food_log(command)

    assert food_log_repository.rows == {}


def test_create_food_log_for_unknown_user(
    container: AppContainer,
    food_log_repository: InMemoryFoodLogRepository,
    apple: FoodNutrition,
) -> None:
    command = CreateFoodLogCommand(
        date_time=LOG_DATE, user_id=uuid4(), food_items=[FoodItemInput(apple.id, 1)]
    )

    with pytest.raises(NotFoundError, match="User"):
        container.food_log_service.create_food_log(command)

    assert food_log_repository.rows == {}


def test_create_food_log_rejects_bad_unit(
    container: AppContainer,
    food_log_repository: InMemoryFoodLogRepository,
    user: User,
    apple: FoodNutrition,
) -> None:
    with pytest.raises(ValidationError):
        _create(container, user, (apple, 0))

    assert food_log_repository.rows == {}


def test_update_food_log_replaces_items(
    container: AppContainer, user: User, apple: FoodNutrition, banana: FoodNutrition
) -> None:
    created = _create(container, user, (apple, 2))
    new_date = LOG_DATE + timedelta(days=1)

    updated = container.food_log_service.update_food_log(
        created.id, new_date, [FoodItemInput(banana.id, 2)]
    )

    assert updated.total_calories == 178
    assert [item.food_name for item in updated.food_items] == ["Banana"]
    assert updated.date_time == new_date
    assert updated.create_time == created.create_time
    assert updated.update_time >= created.update_time


def test_update_food_log_with_unknown_nutrition_keeps_stored_log(
    container: AppContainer, user: User, apple: FoodNutrition
) -> None:
    created = _create(container, user, (apple, 2))

    with pytest.raises(NotFoundError):
        container.food_log_service.update_food_log(
            created.id, None, [FoodItemInput(uuid4(), 1)]
        )

    stored = container.food_log_service.get_food_log(created.id)
    assert stored is not None
    assert stored.total_calories == 104


def test_item_level_operations(
    container: AppContainer, user: User, apple: FoodNutrition, banana: FoodNutrition
) -> None:
    service = container.food_log_service
    created = _create(container, user, (apple, 2))

    with_banana = service.add_food_item(created.id, banana.id, 1)
    assert with_banana.total_calories == 193

    apple_item = with_banana.food_items[0]
    resized = service.update_food_item_unit(created.id, apple_item.id, 3)
    assert resized.total_calories == 245

    removed = service.remove_food_item(created.id, apple_item.id)
    assert removed.total_calories == 89
    assert len(removed.food_items) == 1

    with pytest.raises(NotFoundError):
        service.remove_food_item(created.id, apple_item.id)
    with pytest.raises(NotFoundError):
        service.add_food_item(created.id, uuid4(), 1)


def test_get_food_logs_by_user_newest_first(
    container: AppContainer, user: User, apple: FoodNutrition
) -> None:
    service = container.food_log_service
    older = service.create_food_log(
        CreateFoodLogCommand(date_time=LOG_DATE, user_id=user.id)
    )
    newer = service.create_food_log(
        CreateFoodLogCommand(
            date_time=datetime(2024, 6, 1, tzinfo=UTC),
            user_id=user.id,
            food_items=[FoodItemInput(apple.id, 1)],
        )
    )

    logs = service.get_food_logs_by_user(user.id)

    assert [log.id for log in logs] == [newer.id, older.id]
    assert service.get_food_logs_by_user(uuid4()) == []
    assert len(service.get_all_food_logs()) == 2


def test_delete_food_log(
    container: AppContainer, user: User, apple: FoodNutrition
) -> None:
    created = _create(container, user, (apple, 1))

    container.food_log_service.delete_food_log(created.id)

    assert container.food_log_service.get_food_log(created.id) is None
    with pytest.raises(NotFoundError):
        container.food_log_service.delete_food_log(created.id)


def test_last_writer_wins(
    container: AppContainer, user: User, apple: FoodNutrition, banana: FoodNutrition
) -> None:
    service = container.food_log_service
    created = _create(container, user, (apple, 1))

    service.add_food_item(created.id, banana.id, 1)
    service.update_food_log(created.id, None, [FoodItemInput(apple.id, 3)])

    stored = service.get_food_log(created.id)
    assert stored is not None
    assert [item.food_name for item in stored.food_items] == ["Apple"]
    assert stored.total_calories == 156
