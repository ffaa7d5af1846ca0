"""User endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status

from food_tracker.api.envelope import ok
from food_tracker.api.schemas import (
    ApiResponse,
    CreateUserRequest,
    DailyProgressResponse,
    LoginRequest,
    UpdateUserRequest,
)
from food_tracker.domain.errors import NotFoundError

if TYPE_CHECKING:
    from food_tracker.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
def list_users(request: Request) -> ApiResponse:
    """Return every user."""
    container: AppContainer = request.app.state.container
    return ok(container.user_service.get_all_users())


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(body: CreateUserRequest, request: Request) -> ApiResponse:
    """Register a user."""
    container: AppContainer = request.app.state.container
    user = container.user_service.create_user(
        body.name,
        body.email,
        body.password,
        body.suggested_calories,
        body.suggested_carbs,
        body.suggested_fat,
        body.suggested_protein,
    )
    return ok(user, "User created")


@router.post("/login")
def login(body: LoginRequest, request: Request) -> ApiResponse:
    """Check an email and password pair."""
    container: AppContainer = request.app.state.container
    user = container.user_service.authenticate(body.email, body.password)
    return ok(user, "Login successful")


@router.get("/username/{username}")
def get_user_by_username(username: str, request: Request) -> ApiResponse:
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user_by_username(username)
    if user is None:
        raise NotFoundError("User", username)
    return ok(user)


@router.get("/{user_id}")
def get_user(user_id: UUID, request: Request) -> ApiResponse:
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return ok(user)


@router.put("/{user_id}")
def update_user(
    user_id: UUID, body: UpdateUserRequest, request: Request
) -> ApiResponse:
    """Apply a partial profile update."""
    container: AppContainer = request.app.state.container
    user = container.user_service.update_user(
        user_id, **body.model_dump(exclude_none=True)
    )
    return ok(user, "User updated")


@router.delete("/{user_id}")
def delete_user(user_id: UUID, request: Request) -> ApiResponse:
    container: AppContainer = request.app.state.container
    container.user_service.delete_user(user_id)
    return ok(message="User deleted")


@router.get("/{user_id}/progress")
def daily_progress(user_id: UUID, day: date, request: Request) -> ApiResponse:
    """Return totals for one day against the user's targets."""
    container: AppContainer = request.app.state.container
    progress = container.stats_service.get_daily_progress(user_id, day)
    return ok(DailyProgressResponse.from_progress(progress))
