"""Pydantic models for request bodies and response envelopes."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from food_tracker.domain.stats import DailyProgress
from food_tracker.domain.users import (
    DEFAULT_SUGGESTED_CALORIES,
    DEFAULT_SUGGESTED_CARBS,
    DEFAULT_SUGGESTED_FAT,
    DEFAULT_SUGGESTED_PROTEIN,
)

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ApiResponse(BaseModel):
    """Envelope wrapping every JSON response."""

    success: bool
    data: Any = None
    message: str | None = None
    errors: list[str] = Field(default_factory=list)


class CreateUserRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(pattern=_EMAIL_PATTERN, max_length=255)
    password: str = Field(min_length=6, max_length=255)
    suggested_calories: float = Field(default=DEFAULT_SUGGESTED_CALORIES, ge=0)
    suggested_carbs: float = Field(default=DEFAULT_SUGGESTED_CARBS, ge=0)
    suggested_fat: float = Field(default=DEFAULT_SUGGESTED_FAT, ge=0)
    suggested_protein: float = Field(default=DEFAULT_SUGGESTED_PROTEIN, ge=0)


class UpdateUserRequest(BaseModel):
    """Partial user update; omitted fields keep their stored values."""

    name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, pattern=_EMAIL_PATTERN, max_length=255)
    password: str | None = Field(default=None, min_length=6, max_length=255)
    suggested_calories: float | None = Field(default=None, ge=0)
    suggested_carbs: float | None = Field(default=None, ge=0)
    suggested_fat: float | None = Field(default=None, ge=0)
    suggested_protein: float | None = Field(default=None, ge=0)


class LoginRequest(BaseModel):
    email: str
    password: str


class FoodNutritionRequest(BaseModel):
    """Nutrition facts per one unit of measurement."""

    name: str = Field(min_length=1, max_length=255)
    measurement: str = Field(min_length=1, max_length=64)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    protein: float = Field(ge=0)
    calories: float = Field(ge=0)


class FoodItemRequest(BaseModel):
    food_nutrition_id: UUID
    unit: int = Field(gt=0)


class CreateFoodLogRequest(BaseModel):
    date_time: datetime
    user_id: UUID
    food_items: list[FoodItemRequest] = Field(default_factory=list)


class UpdateFoodLogRequest(BaseModel):
    """Replacement item list, with an optional new date."""

    date_time: datetime | None = None
    food_items: list[FoodItemRequest] = Field(default_factory=list)


class UpdateFoodItemUnitRequest(BaseModel):
    unit: int = Field(gt=0)


class DailyProgressResponse(BaseModel):
    """Logged totals for one day next to the user's targets."""

    user_id: UUID
    day: date
    log_count: int
    calories: float
    carbs: float
    protein: float
    fat: float
    suggested_calories: float
    suggested_carbs: float
    suggested_protein: float
    suggested_fat: float
    remaining_calories: float
    remaining_carbs: float
    remaining_protein: float
    remaining_fat: float

    @classmethod
    def from_progress(cls, progress: DailyProgress) -> "DailyProgressResponse":
        return cls(
            user_id=progress.user_id,
            day=progress.totals.day,
            log_count=progress.log_count,
            calories=progress.totals.calories,
            carbs=progress.totals.carbs,
            protein=progress.totals.protein,
            fat=progress.totals.fat,
            suggested_calories=progress.suggested_calories,
            suggested_carbs=progress.suggested_carbs,
            suggested_protein=progress.suggested_protein,
            suggested_fat=progress.suggested_fat,
            remaining_calories=progress.remaining_calories,
            remaining_carbs=progress.remaining_carbs,
            remaining_protein=progress.remaining_protein,
            remaining_fat=progress.remaining_fat,
        )
