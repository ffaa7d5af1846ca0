"""Transfer records returned by the services."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from food_tracker.domain.food_logs import FoodItem, FoodLog
from food_tracker.domain.nutrition import FoodNutrition
from food_tracker.domain.users import User


@dataclass(frozen=True)
class FoodNutritionDto:
    """Nutrition facts per unit."""

    id: UUID
    name: str
    measurement: str
    carbs: float
    fat: float
    protein: float
    calories: float


@dataclass(frozen=True)
class FoodLogItemDto:
    """A food log line with its computed nutrients."""

    id: UUID
    food_nutrition_id: UUID
    food_name: str
    measurement: str
    unit: int
    calories: float
    carbs: float
    protein: float
    fat: float


@dataclass(frozen=True)
class FoodLogDto:
    """A food log with totals and items."""

    id: UUID
    date_time: datetime
    create_time: datetime
    update_time: datetime
    user_id: UUID
    total_calories: float
    total_carbs: float
    total_protein: float
    total_fat: float
    food_items: list[FoodLogItemDto]


@dataclass(frozen=True)
class UserDto:
    """Public view of a user; never carries the password."""

    id: UUID
    name: str
    email: str
    suggested_calories: float
    suggested_carbs: float
    suggested_fat: float
    suggested_protein: float


def food_nutrition_to_dto(food_nutrition: FoodNutrition) -> FoodNutritionDto:
    return FoodNutritionDto(
        id=food_nutrition.id,
        name=food_nutrition.name,
        measurement=food_nutrition.measurement,
        carbs=food_nutrition.carbs,
        fat=food_nutrition.fat,
        protein=food_nutrition.protein,
        calories=food_nutrition.calories,
    )


def food_item_to_dto(food_item: FoodItem) -> FoodLogItemDto:
    return FoodLogItemDto(
        id=food_item.id,
        food_nutrition_id=food_item.food_nutrition_id,
        food_name=food_item.food_nutrition.name,
        measurement=food_item.food_nutrition.measurement,
        unit=food_item.unit,
        calories=food_item.calculate_calories(),
        carbs=food_item.calculate_carbs(),
        protein=food_item.calculate_protein(),
        fat=food_item.calculate_fat(),
    )


def food_log_to_dto(food_log: FoodLog) -> FoodLogDto:
    return FoodLogDto(
        id=food_log.id,
        date_time=food_log.date_time,
        create_time=food_log.create_time,
        update_time=food_log.update_time,
        user_id=food_log.user_id,
        total_calories=food_log.total_calories,
        total_carbs=food_log.total_carbs,
        total_protein=food_log.total_protein,
        total_fat=food_log.total_fat,
        food_items=[food_item_to_dto(item) for item in food_log.food_items],
    )


def user_to_dto(user: User) -> UserDto:
    return UserDto(
        id=user.id,
        name=user.name,
        email=user.email,
        suggested_calories=user.suggested_calories,
        suggested_carbs=user.suggested_carbs,
        suggested_fat=user.suggested_fat,
        suggested_protein=user.suggested_protein,
    )
