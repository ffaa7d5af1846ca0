"""Food log endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status

from food_tracker.api.envelope import ok
from food_tracker.api.schemas import (
    ApiResponse,
    CreateFoodLogRequest,
    FoodItemRequest,
    UpdateFoodItemUnitRequest,
    UpdateFoodLogRequest,
)
from food_tracker.domain.errors import NotFoundError
from food_tracker.services.food_logs import CreateFoodLogCommand, FoodItemInput

if TYPE_CHECKING:
    from food_tracker.containers import AppContainer

router = APIRouter(prefix="/api/foodlog", tags=["food logs"])


def _items(food_items: list[FoodItemRequest]) -> list[FoodItemInput]:
    return [
        FoodItemInput(food_nutrition_id=item.food_nutrition_id, unit=item.unit)
        for item in food_items
    ]


@router.get("")
def list_food_logs(request: Request) -> ApiResponse:
    container: AppContainer = request.app.state.container
    return ok(container.food_log_service.get_all_food_logs())


@router.post("", status_code=status.HTTP_201_CREATED)
def create_food_log(body: CreateFoodLogRequest, request: Request) -> ApiResponse:
    """Create a food log with its items."""
    container: AppContainer = request.app.state.container
    food_log = container.food_log_service.create_food_log(
        CreateFoodLogCommand(
            date_time=body.date_time,
            user_id=body.user_id,
            food_items=_items(body.food_items),
        )
    )
    return ok(food_log, "Food log created")


@router.get("/user/{user_id}")
def list_user_food_logs(user_id: UUID, request: Request) -> ApiResponse:
    """Return a user's logs, newest first."""
    container: AppContainer = request.app.state.container
    return ok(container.food_log_service.get_food_logs_by_user(user_id))


@router.get("/{food_log_id}")
def get_food_log(food_log_id: UUID, request: Request) -> ApiResponse:
    container: AppContainer = request.app.state.container
    food_log = container.food_log_service.get_food_log(food_log_id)
    if food_log is None:
        raise NotFoundError("FoodLog", food_log_id)
    return ok(food_log)


@router.put("/{food_log_id}")
def update_food_log(
    food_log_id: UUID, body: UpdateFoodLogRequest, request: Request
) -> ApiResponse:
    """Replace the items of a log."""
    container: AppContainer = request.app.state.container
    food_log = container.food_log_service.update_food_log(
        food_log_id, body.date_time, _items(body.food_items)
    )
    return ok(food_log, "Food log updated")


@router.delete("/{food_log_id}")
def delete_food_log(food_log_id: UUID, request: Request) -> ApiResponse:
    container: AppContainer = request.app.state.container
    container.food_log_service.delete_food_log(food_log_id)
    return ok(message="Food log deleted")


@router.post("/{food_log_id}/items", status_code=status.HTTP_201_CREATED)
def add_food_item(
    food_log_id: UUID, body: FoodItemRequest, request: Request
) -> ApiResponse:
    container: AppContainer = request.app.state.container
    food_log = container.food_log_service.add_food_item(
        food_log_id, body.food_nutrition_id, body.unit
    )
    return ok(food_log, "Food item added")


@router.patch("/{food_log_id}/items/{food_item_id}")
def update_food_item_unit(
    food_log_id: UUID,
    food_item_id: UUID,
    body: UpdateFoodItemUnitRequest,
    request: Request,
) -> ApiResponse:
    container: AppContainer = request.app.state.container
    food_log = container.food_log_service.update_food_item_unit(
        food_log_id, food_item_id, body.unit
    )
    return ok(food_log, "Food item updated")


@router.delete("/{food_log_id}/items/{food_item_id}")
def remove_food_item(
    food_log_id: UUID, food_item_id: UUID, request: Request
) -> ApiResponse:
    container: AppContainer = request.app.state.container
    food_log = container.food_log_service.remove_food_item(food_log_id, food_item_id)
    return ok(food_log, "Food item removed")
