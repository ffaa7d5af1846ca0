"""Tests for stats service."""

from datetime import date, datetime, timedelta
from uuid import uuid4

import pytest

from food_tracker.containers import AppContainer
from food_tracker.domain.errors import NotFoundError
from food_tracker.domain.nutrition import FoodNutrition
from food_tracker.domain.users import User
from food_tracker.services.food_logs import CreateFoodLogCommand, FoodItemInput
from tests.conftest import LOG_DATE


def _log(
    container: AppContainer, user: User, when: datetime, food: FoodNutrition, unit: int
) -> None:
    container.food_log_service.create_food_log(
        CreateFoodLogCommand(
            date_time=when,
            user_id=user.id,
            food_items=[FoodItemInput(food.id, unit)],
        )
    )


def test_daily_progress_sums_logs_for_the_day(
    container: AppContainer, user: User, apple: FoodNutrition, banana: FoodNutrition
) -> None:
    _log(container, user, LOG_DATE, apple, 2)
    _log(container, user, LOG_DATE.replace(hour=19), banana, 1)
    _log(container, user, LOG_DATE - timedelta(days=1), banana, 5)

    progress = container.stats_service.get_daily_progress(user.id, LOG_DATE.date())

    assert progress.log_count == 2
    assert progress.totals.calories == 193
    assert progress.totals.carbs == pytest.approx(51)
    assert progress.remaining_calories == pytest.approx(user.suggested_calories - 193)


def test_daily_progress_empty_day(container: AppContainer, user: User) -> None:
    progress = container.stats_service.get_daily_progress(user.id, date(2020, 1, 1))

    assert progress.log_count == 0
    assert progress.totals.calories == 0.0
    assert progress.remaining_protein == user.suggested_protein


def test_daily_progress_unknown_user(container: AppContainer) -> None:
    with pytest.raises(NotFoundError):
        container.stats_service.get_daily_progress(uuid4(), date(2024, 5, 14))
