"""Food log use cases.

Every operation resolves all referenced rows before it mutates an aggregate,
and persists only after the aggregate is complete. A missing user, food log or
nutrition row aborts the whole call with ``NotFoundError``.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import UUID, uuid4

from food_tracker.domain.dtos import FoodLogDto, food_log_to_dto
from food_tracker.domain.errors import NotFoundError
from food_tracker.domain.food_logs import FoodItem, FoodLog
from food_tracker.domain.nutrition import FoodNutrition
from food_tracker.services.nutrition import FoodNutritionRepository
from food_tracker.services.users import UserRepository

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def get_by_id(self, food_log_id: UUID) -> FoodLog | None:
        """Return a food log with its items, if present."""

    def get_all(self) -> list[FoodLog]:
        """Return every food log."""

    def get_by_user_id(self, user_id: UUID) -> list[FoodLog]:
        """Return a user's food logs, newest date first."""

    def add(self, food_log: FoodLog) -> FoodLog:
        """Persist a new food log and its items."""

    def update(self, food_log: FoodLog) -> FoodLog:
        """Replace the stored state of a food log."""

    def delete(self, food_log_id: UUID) -> None:
        """Delete a food log by id; unknown ids are ignored."""

    def delete_entity(self, food_log: FoodLog) -> None:
        """Delete the given food log."""

    def delete_by_ids(self, food_log_ids: Iterable[UUID]) -> None:
        """Delete several food logs."""

    def delete_all(self) -> None:
        """Delete every food log."""

    def references_food_nutrition(self, food_nutrition_id: UUID) -> bool:
        """Return True when any stored item uses the nutrition row."""


@dataclass(frozen=True)
class FoodItemInput:
    """Requested line for a food log."""

    food_nutrition_id: UUID
    unit: int


@dataclass(frozen=True)
class CreateFoodLogCommand:
    """Input for creating a food log."""

    date_time: datetime
    user_id: UUID
    food_items: list[FoodItemInput] = field(default_factory=list)


@dataclass
class FoodLogService:
    """Application service for food logs."""

    repository: FoodLogRepository
    food_nutrition_repository: FoodNutritionRepository
    user_repository: UserRepository

    def create_food_log(self, command: CreateFoodLogCommand) -> FoodLogDto:
        """Create a food log for an existing user."""
        if self.user_repository.get_by_id(command.user_id) is None:
            raise NotFoundError("User", command.user_id)
        resolved = self._resolve_items(command.food_items)
        food_log = FoodLog(uuid4(), command.date_time, command.user_id)
        for item, food_nutrition in resolved:
            food_log.add_food_item(
                FoodItem.create(
                    item.food_nutrition_id, item.unit, food_log.id, food_nutrition
                )
            )
        saved = self.repository.add(food_log)
        _logger.info(
            "Food log created: id=%s user_id=%s items=%s",
            saved.id,
            saved.user_id,
            len(saved.food_items),
        )
        return food_log_to_dto(saved)

    def update_food_log(
        self,
        food_log_id: UUID,
        date_time: datetime | None,
        food_items: list[FoodItemInput],
    ) -> FoodLogDto:
        """Replace the items of a log and optionally move its date."""
        food_log = self._require(food_log_id)
        resolved = self._resolve_items(food_items)
        food_log.clear_food_items()
        for item, food_nutrition in resolved:
            food_log.add_item_for(item.food_nutrition_id, item.unit, food_nutrition)
        if date_time is not None:
            food_log.update_date_time(date_time)
        saved = self.repository.update(food_log)
        _logger.info("Food log updated: id=%s items=%s", saved.id, len(food_items))
        return food_log_to_dto(saved)

    def add_food_item(
        self, food_log_id: UUID, food_nutrition_id: UUID, unit: int
    ) -> FoodLogDto:
        """Append one item to an existing log."""
        food_log = self._require(food_log_id)
        food_nutrition = self._require_nutrition(food_nutrition_id)
        food_log.add_item_for(food_nutrition_id, unit, food_nutrition)
        return food_log_to_dto(self.repository.update(food_log))

    def remove_food_item(self, food_log_id: UUID, food_item_id: UUID) -> FoodLogDto:
        """Remove one item from a log."""
        food_log = self._require(food_log_id)
        food_item = food_log.find_food_item(food_item_id)
        if food_item is None:
            raise NotFoundError("FoodItem", food_item_id)
        food_log.remove_food_item(food_item)
        return food_log_to_dto(self.repository.update(food_log))

    def update_food_item_unit(
        self, food_log_id: UUID, food_item_id: UUID, unit: int
    ) -> FoodLogDto:
        """Change the quantity of one item in a log."""
        food_log = self._require(food_log_id)
        food_log.update_food_item_unit(food_item_id, unit)
        return food_log_to_dto(self.repository.update(food_log))

    def delete_food_log(self, food_log_id: UUID) -> None:
        """Delete a food log."""
        food_log = self._require(food_log_id)
        self.repository.delete_entity(food_log)
        _logger.info("Food log deleted: id=%s", food_log_id)

    def get_food_log(self, food_log_id: UUID) -> FoodLogDto | None:
        """Return a food log by id, if present."""
        food_log = self.repository.get_by_id(food_log_id)
        return food_log_to_dto(food_log) if food_log else None

    def get_all_food_logs(self) -> list[FoodLogDto]:
        return [food_log_to_dto(log) for log in self.repository.get_all()]

    def get_food_logs_by_user(self, user_id: UUID) -> list[FoodLogDto]:
        return [food_log_to_dto(log) for log in self.repository.get_by_user_id(user_id)]

    def _require(self, food_log_id: UUID) -> FoodLog:
        food_log = self.repository.get_by_id(food_log_id)
        if food_log is None:
            raise NotFoundError("FoodLog", food_log_id)
        return food_log

    def _require_nutrition(self, food_nutrition_id: UUID) -> FoodNutrition:
        food_nutrition = self.food_nutrition_repository.get_by_id(food_nutrition_id)
        if food_nutrition is None:
            raise NotFoundError("FoodNutrition", food_nutrition_id)
        return food_nutrition

    def _resolve_items(
        self, food_items: list[FoodItemInput]
    ) -> list[tuple[FoodItemInput, FoodNutrition]]:
        cache: dict[UUID, FoodNutrition] = {}
        resolved: list[tuple[FoodItemInput, FoodNutrition]] = []
        for item in food_items:
            if item.food_nutrition_id not in cache:
                cache[item.food_nutrition_id] = self._require_nutrition(
                    item.food_nutrition_id
                )
            resolved.append((item, cache[item.food_nutrition_id]))
        return resolved
