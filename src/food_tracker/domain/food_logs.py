"""Food log aggregate and its owned food items.

A ``FoodLog`` owns an ordered list of ``FoodItem`` entries and caches the
nutritional totals of those items. The totals are recomputed from scratch after
every mutation so they always equal the sum over the current items.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from food_tracker.domain.errors import (
    NIL_ID,
    NotFoundError,
    ValidationError,
    require_id,
)
from food_tracker.domain.nutrition import FoodNutrition


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def _require_positive_unit(unit: int) -> int:
    if isinstance(unit, bool) or not isinstance(unit, int):
        raise ValidationError("Unit must be a whole number")
    if unit <= 0:
        raise ValidationError("Unit must be positive")
    return unit


class FoodItem:
    """A quantity of one food inside a food log."""

    def __init__(
        self,
        id: UUID | None,  # noqa: A002
        food_nutrition_id: UUID,
        unit: int,
        food_log_id: UUID,
        food_nutrition: FoodNutrition | None,
    ) -> None:
        require_id(food_nutrition_id, "FoodNutritionId")
        require_id(food_log_id, "FoodLogId")
        _require_positive_unit(unit)
        if food_nutrition is None:
            raise ValidationError("FoodNutrition must be resolved")
        if food_nutrition.id != food_nutrition_id:
            raise ValidationError(
                "FoodNutrition does not match FoodNutritionId "
                f"{food_nutrition_id}"
            )
        self._id = uuid4() if id is None or id == NIL_ID else id
        self._food_nutrition_id = food_nutrition_id
        self._unit = unit
        self._food_log_id = food_log_id
        self._food_nutrition = food_nutrition
        # Set while the item sits in a log, so unit changes refresh its totals.
        self._owner: FoodLog | None = None

    @classmethod
    def create(
        cls,
        food_nutrition_id: UUID,
        unit: int,
        food_log_id: UUID,
        food_nutrition: FoodNutrition | None,
    ) -> "FoodItem":
        """Create an item with a fresh id."""
        return cls(uuid4(), food_nutrition_id, unit, food_log_id, food_nutrition)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def food_nutrition_id(self) -> UUID:
        return self._food_nutrition_id

    @property
    def unit(self) -> int:
        return self._unit

    @property
    def food_log_id(self) -> UUID:
        return self._food_log_id

    @property
    def food_nutrition(self) -> FoodNutrition:
        return self._food_nutrition

    def calculate_calories(self) -> float:
        return self._food_nutrition.calories * self._unit

    def calculate_carbs(self) -> float:
        return self._food_nutrition.carbs * self._unit

    def calculate_protein(self) -> float:
        return self._food_nutrition.protein * self._unit

    def calculate_fat(self) -> float:
        return self._food_nutrition.fat * self._unit

    def update_unit(self, unit: int) -> None:
        """Change the quantity of this item and refresh the owning log."""
        self._unit = _require_positive_unit(unit)
        if self._owner is not None:
            self._owner._touch()  # noqa: SLF001

    def __repr__(self) -> str:
        return (
            f"FoodItem(id={self._id!s}, food_nutrition_id="
            f"{self._food_nutrition_id!s}, unit={self._unit})"
        )


class FoodLog:
    """Aggregate root holding the food items eaten by one user on one date."""

    def __init__(
        self,
        id: UUID | None,  # noqa: A002
        date_time: datetime,
        user_id: UUID,
    ) -> None:
        self._user_id = require_id(user_id, "UserId")
        self._id = uuid4() if id is None or id == NIL_ID else id
        self._date_time = date_time
        now = _utcnow()
        self._create_time = now
        self._update_time = now
        self._food_items: list[FoodItem] = []
        self._total_calories = 0.0
        self._total_carbs = 0.0
        self._total_protein = 0.0
        self._total_fat = 0.0

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def date_time(self) -> datetime:
        return self._date_time

    @property
    def create_time(self) -> datetime:
        return self._create_time

    @property
    def update_time(self) -> datetime:
        return self._update_time

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def food_items(self) -> tuple[FoodItem, ...]:
        return tuple(self._food_items)

    @property
    def total_calories(self) -> float:
        return self._total_calories

    @property
    def total_carbs(self) -> float:
        return self._total_carbs

    @property
    def total_protein(self) -> float:
        return self._total_protein

    @property
    def total_fat(self) -> float:
        return self._total_fat

    def add_food_item(self, food_item: FoodItem) -> None:
        """Append an item built for this log."""
        if food_item.food_log_id != self._id:
            raise ValidationError(
                f"FoodItem {food_item.id} belongs to food log {food_item.food_log_id}"
            )
        self._adopt(food_item)
        self._touch()

    def add_item_for(
        self,
        food_nutrition_id: UUID,
        unit: int,
        food_nutrition: FoodNutrition | None,
    ) -> FoodItem:
        """Build an item owned by this log, append it and return it."""
        food_item = FoodItem.create(food_nutrition_id, unit, self._id, food_nutrition)
        self._adopt(food_item)
        self._touch()
        return food_item

    def remove_food_item(self, food_item: FoodItem) -> None:
        """Remove the item with the same identity; unknown items are ignored."""
        for index, existing in enumerate(self._food_items):
            if existing is food_item or existing.id == food_item.id:
                existing._owner = None  # noqa: SLF001
                del self._food_items[index]
                break
        self._touch()

    def clear_food_items(self) -> None:
        """Remove every item and reset the totals."""
        for item in self._food_items:
            item._owner = None  # noqa: SLF001
        self._food_items.clear()
        self._touch()

    def find_food_item(self, food_item_id: UUID) -> FoodItem | None:
        """Return the owned item with the given id, if present."""
        for item in self._food_items:
            if item.id == food_item_id:
                return item
        return None

    def update_food_item_unit(self, food_item_id: UUID, unit: int) -> FoodItem:
        """Change the quantity of an owned item and refresh the totals."""
        item = self.find_food_item(food_item_id)
        if item is None:
            raise NotFoundError("FoodItem", food_item_id)
        item.update_unit(unit)
        return item

    def update_date_time(self, date_time: datetime) -> None:
        """Move the log to another nutritional date."""
        self._date_time = date_time
        self._update_time = _utcnow()

    def _adopt(self, food_item: FoodItem) -> None:
        food_item._owner = self  # noqa: SLF001
        self._food_items.append(food_item)

    def _touch(self) -> None:
        self._recalculate_totals()
        self._update_time = _utcnow()

    def _recalculate_totals(self) -> None:
        self._total_calories = sum(
            (item.calculate_calories() for item in self._food_items), 0.0
        )
        self._total_carbs = sum(
            (item.calculate_carbs() for item in self._food_items), 0.0
        )
        self._total_protein = sum(
            (item.calculate_protein() for item in self._food_items), 0.0
        )
        self._total_fat = sum((item.calculate_fat() for item in self._food_items), 0.0)

    def __repr__(self) -> str:
        return (
            f"FoodLog(id={self._id!s}, user_id={self._user_id!s}, "
            f"items={len(self._food_items)})"
        )
