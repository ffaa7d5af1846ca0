"""Rebuild entities from stored rows.

Storage adapters use these factories instead of the public constructors so
stored ids and audit timestamps survive a round trip. Use-case code must not
call them.
"""

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from food_tracker.domain.errors import ValidationError
from food_tracker.domain.food_logs import FoodItem, FoodLog
from food_tracker.domain.nutrition import FoodNutrition
from food_tracker.domain.users import User


def restore_food_nutrition(  # noqa: PLR0913
    *,
    id: UUID,  # noqa: A002
    name: str,
    measurement: str,
    carbs: float,
    fat: float,
    protein: float,
    calories: float,
) -> FoodNutrition:
    return FoodNutrition(id, name, measurement, carbs, fat, protein, calories)


def restore_food_item(
    *,
    id: UUID,  # noqa: A002
    food_nutrition: FoodNutrition,
    unit: int,
    food_log_id: UUID,
) -> FoodItem:
    return FoodItem(id, food_nutrition.id, unit, food_log_id, food_nutrition)


def restore_food_log(  # noqa: PLR0913
    *,
    id: UUID,  # noqa: A002
    date_time: datetime,
    user_id: UUID,
    create_time: datetime,
    update_time: datetime,
    food_items: Iterable[FoodItem],
) -> FoodLog:
    """Rebuild a log; totals are derived from the items, not from storage."""
    food_log = FoodLog(id, date_time, user_id)
    for item in food_items:
        if item.food_log_id != food_log.id:
            raise ValidationError(
                f"FoodItem {item.id} belongs to food log {item.food_log_id}"
            )
        food_log._adopt(item)  # noqa: SLF001
    food_log._recalculate_totals()  # noqa: SLF001
    food_log._create_time = create_time  # noqa: SLF001
    food_log._update_time = update_time  # noqa: SLF001
    return food_log


def restore_user(  # noqa: PLR0913
    *,
    id: UUID,  # noqa: A002
    name: str,
    email: str,
    password: str,
    suggested_calories: float,
    suggested_carbs: float,
    suggested_fat: float,
    suggested_protein: float,
) -> User:
    return User(
        id,
        name,
        email,
        password,
        suggested_calories,
        suggested_carbs,
        suggested_fat,
        suggested_protein,
    )
