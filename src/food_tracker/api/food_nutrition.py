"""Nutrition catalogue endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status

from food_tracker.api.envelope import ok
from food_tracker.api.schemas import ApiResponse, FoodNutritionRequest
from food_tracker.domain.errors import NotFoundError

if TYPE_CHECKING:
    from food_tracker.containers import AppContainer

router = APIRouter(prefix="/api/foodnutrition", tags=["food nutrition"])


@router.get("")
def list_food_nutrition(request: Request) -> ApiResponse:
    container: AppContainer = request.app.state.container
    return ok(container.food_nutrition_service.get_all_food_nutrition())


@router.post("", status_code=status.HTTP_201_CREATED)
def create_food_nutrition(body: FoodNutritionRequest, request: Request) -> ApiResponse:
    """Add a row to the nutrition catalogue."""
    container: AppContainer = request.app.state.container
    food_nutrition = container.food_nutrition_service.create_food_nutrition(
        body.name,
        body.measurement,
        body.carbs,
        body.fat,
        body.protein,
        body.calories,
    )
    return ok(food_nutrition, "Food nutrition created")


@router.get("/search")
def search_food_nutrition(request: Request, name: str | None = None) -> ApiResponse:
    """Case-insensitive substring search; no name returns everything."""
    container: AppContainer = request.app.state.container
    return ok(container.food_nutrition_service.search_food_nutrition(name))


@router.get("/{food_nutrition_id}")
def get_food_nutrition(food_nutrition_id: UUID, request: Request) -> ApiResponse:
    container: AppContainer = request.app.state.container
    food_nutrition = container.food_nutrition_service.get_food_nutrition(
        food_nutrition_id
    )
    if food_nutrition is None:
        raise NotFoundError("FoodNutrition", food_nutrition_id)
    return ok(food_nutrition)


@router.put("/{food_nutrition_id}")
def update_food_nutrition(
    food_nutrition_id: UUID, body: FoodNutritionRequest, request: Request
) -> ApiResponse:
    container: AppContainer = request.app.state.container
    food_nutrition = container.food_nutrition_service.update_food_nutrition(
        food_nutrition_id,
        body.name,
        body.measurement,
        body.carbs,
        body.fat,
        body.protein,
        body.calories,
    )
    return ok(food_nutrition, "Food nutrition updated")


@router.delete("/{food_nutrition_id}")
def delete_food_nutrition(food_nutrition_id: UUID, request: Request) -> ApiResponse:
    """Delete a row that no food log uses."""
    container: AppContainer = request.app.state.container
    container.food_nutrition_service.delete_food_nutrition(food_nutrition_id)
    return ok(message="Food nutrition deleted")
