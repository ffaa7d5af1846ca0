"""Services for the shared catalogue of nutrition facts."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from food_tracker.domain.dtos import FoodNutritionDto, food_nutrition_to_dto
from food_tracker.domain.errors import ConflictError, NotFoundError
from food_tracker.domain.nutrition import FoodNutrition

_logger = logging.getLogger(__name__)


class FoodNutritionReferences(Protocol):
    """Lookup for food logs that still point at a nutrition row."""

    def references_food_nutrition(self, food_nutrition_id: UUID) -> bool:
        """Return True when any stored food item uses the nutrition row."""


class FoodNutritionRepository(Protocol):
    """Persistence interface for nutrition facts."""

    def get_by_id(self, food_nutrition_id: UUID) -> FoodNutrition | None:
        """Return nutrition facts by id, if present."""

    def get_all(self) -> list[FoodNutrition]:
        """Return every nutrition row."""

    def search_by_name(self, name: str) -> list[FoodNutrition]:
        """Return rows whose name contains the text, ignoring case."""

    def add(self, food_nutrition: FoodNutrition) -> FoodNutrition:
        """Persist a new row and return it."""

    def update(self, food_nutrition: FoodNutrition) -> FoodNutrition:
        """Persist changes to an existing row and return it."""

    def delete(self, food_nutrition_id: UUID) -> None:
        """Delete a row by id."""


@dataclass
class FoodNutritionService:
    """Application service for nutrition facts."""

    repository: FoodNutritionRepository
    food_log_repository: FoodNutritionReferences

    def create_food_nutrition(  # noqa: PLR0913
        self,
        name: str,
        measurement: str,
        carbs: float,
        fat: float,
        protein: float,
        calories: float,
    ) -> FoodNutritionDto:
        """Validate and store new nutrition facts."""
        food_nutrition = FoodNutrition.create(
            name, measurement, carbs, fat, protein, calories
        )
        saved = self.repository.add(food_nutrition)
        _logger.info("Food nutrition created: id=%s name=%s", saved.id, saved.name)
        return food_nutrition_to_dto(saved)

    def update_food_nutrition(  # noqa: PLR0913
        self,
        food_nutrition_id: UUID,
        name: str,
        measurement: str,
        carbs: float,
        fat: float,
        protein: float,
        calories: float,
    ) -> FoodNutritionDto:
        """Replace the facts of an existing row."""
        food_nutrition = self._require(food_nutrition_id)
        food_nutrition.update(name, measurement, carbs, fat, protein, calories)
        saved = self.repository.update(food_nutrition)
        _logger.info("Food nutrition updated: id=%s", saved.id)
        return food_nutrition_to_dto(saved)

    def get_food_nutrition(self, food_nutrition_id: UUID) -> FoodNutritionDto | None:
        """Return nutrition facts by id, if present."""
        food_nutrition = self.repository.get_by_id(food_nutrition_id)
        if food_nutrition is None:
            return None
        return food_nutrition_to_dto(food_nutrition)

    def get_all_food_nutrition(self) -> list[FoodNutritionDto]:
        return [food_nutrition_to_dto(row) for row in self.repository.get_all()]

    def search_food_nutrition(self, name: str | None) -> list[FoodNutritionDto]:
        """Search by name, returning the whole catalogue for an empty query."""
        if not name or not name.strip():
            return self.get_all_food_nutrition()
        return [
            food_nutrition_to_dto(row)
            for row in self.repository.search_by_name(name.strip())
        ]

    def delete_food_nutrition(self, food_nutrition_id: UUID) -> None:
        """Delete a row unless a food log still references it."""
        self._require(food_nutrition_id)
        if self.food_log_repository.references_food_nutrition(food_nutrition_id):
            raise ConflictError(
                f"FoodNutrition {food_nutrition_id} is referenced by food logs"
            )
        self.repository.delete(food_nutrition_id)
        _logger.info("Food nutrition deleted: id=%s", food_nutrition_id)

    def _require(self, food_nutrition_id: UUID) -> FoodNutrition:
        food_nutrition = self.repository.get_by_id(food_nutrition_id)
        if food_nutrition is None:
            raise NotFoundError("FoodNutrition", food_nutrition_id)
        return food_nutrition
