"""Dict-backed repositories for local runs and tests.

Rows are stored as frozen snapshots and rebuilt on every read, so entities
handed to callers never alias stored state.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from food_tracker.domain.food_logs import FoodLog
from food_tracker.domain.hydration import (
    restore_food_item,
    restore_food_log,
    restore_food_nutrition,
    restore_user,
)
from food_tracker.domain.nutrition import FoodNutrition
from food_tracker.domain.users import User
from food_tracker.services.food_logs import FoodLogRepository
from food_tracker.services.nutrition import FoodNutritionRepository
from food_tracker.services.users import UserRepository


@dataclass(frozen=True)
class _NutritionRow:
    id: UUID
    name: str
    measurement: str
    carbs: float
    fat: float
    protein: float
    calories: float

    @classmethod
    def of(cls, food_nutrition: FoodNutrition) -> "_NutritionRow":
        return cls(
            id=food_nutrition.id,
            name=food_nutrition.name,
            measurement=food_nutrition.measurement,
            carbs=food_nutrition.carbs,
            fat=food_nutrition.fat,
            protein=food_nutrition.protein,
            calories=food_nutrition.calories,
        )

    def restore(self) -> FoodNutrition:
        return restore_food_nutrition(
            id=self.id,
            name=self.name,
            measurement=self.measurement,
            carbs=self.carbs,
            fat=self.fat,
            protein=self.protein,
            calories=self.calories,
        )


@dataclass(frozen=True)
class _ItemRow:
    id: UUID
    unit: int
    nutrition: _NutritionRow


@dataclass(frozen=True)
class _FoodLogRow:
    id: UUID
    date_time: datetime
    create_time: datetime
    update_time: datetime
    user_id: UUID
    items: tuple[_ItemRow, ...]

    @classmethod
    def of(cls, food_log: FoodLog) -> "_FoodLogRow":
        return cls(
            id=food_log.id,
            date_time=food_log.date_time,
            create_time=food_log.create_time,
            update_time=food_log.update_time,
            user_id=food_log.user_id,
            items=tuple(
                _ItemRow(
                    id=item.id,
                    unit=item.unit,
                    nutrition=_NutritionRow.of(item.food_nutrition),
                )
                for item in food_log.food_items
            ),
        )

    def restore(self) -> FoodLog:
        return restore_food_log(
            id=self.id,
            date_time=self.date_time,
            user_id=self.user_id,
            create_time=self.create_time,
            update_time=self.update_time,
            food_items=[
                restore_food_item(
                    id=item.id,
                    food_nutrition=item.nutrition.restore(),
                    unit=item.unit,
                    food_log_id=self.id,
                )
                for item in self.items
            ],
        )


@dataclass(frozen=True)
class _UserRow:
    id: UUID
    name: str
    email: str
    password: str
    suggested_calories: float
    suggested_carbs: float
    suggested_fat: float
    suggested_protein: float

    @classmethod
    def of(cls, user: User) -> "_UserRow":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            password=user.password,
            suggested_calories=user.suggested_calories,
            suggested_carbs=user.suggested_carbs,
            suggested_fat=user.suggested_fat,
            suggested_protein=user.suggested_protein,
        )

    def restore(self) -> User:
        return restore_user(
            id=self.id,
            name=self.name,
            email=self.email,
            password=self.password,
            suggested_calories=self.suggested_calories,
            suggested_carbs=self.suggested_carbs,
            suggested_fat=self.suggested_fat,
            suggested_protein=self.suggested_protein,
        )


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository."""

    rows: dict[UUID, _UserRow] = field(default_factory=dict)

    def get_by_id(self, user_id: UUID) -> User | None:
        row = self.rows.get(user_id)
        return row.restore() if row else None

    def get_by_email(self, email: str) -> User | None:
        for row in self.rows.values():
            if row.email == email:
                return row.restore()
        return None

    def get_by_username(self, name: str) -> User | None:
        for row in self.rows.values():
            if row.name == name:
                return row.restore()
        return None

    def get_all(self) -> list[User]:
        return [row.restore() for row in self.rows.values()]

    def add(self, user: User) -> User:
        self.rows[user.id] = _UserRow.of(user)
        return user

    def update(self, user: User) -> User:
        self.rows[user.id] = _UserRow.of(user)
        return user

    def delete(self, user_id: UUID) -> None:
        self.rows.pop(user_id, None)


@dataclass
class InMemoryFoodNutritionRepository(FoodNutritionRepository):
    """In-memory nutrition facts repository."""

    rows: dict[UUID, _NutritionRow] = field(default_factory=dict)

    def get_by_id(self, food_nutrition_id: UUID) -> FoodNutrition | None:
        row = self.rows.get(food_nutrition_id)
        return row.restore() if row else None

    def get_all(self) -> list[FoodNutrition]:
        return [row.restore() for row in self.rows.values()]

    def search_by_name(self, name: str) -> list[FoodNutrition]:
        query = name.lower()
        return [
            row.restore() for row in self.rows.values() if query in row.name.lower()
        ]

    def add(self, food_nutrition: FoodNutrition) -> FoodNutrition:
        self.rows[food_nutrition.id] = _NutritionRow.of(food_nutrition)
        return food_nutrition

    def update(self, food_nutrition: FoodNutrition) -> FoodNutrition:
        self.rows[food_nutrition.id] = _NutritionRow.of(food_nutrition)
        return food_nutrition

    def delete(self, food_nutrition_id: UUID) -> None:
        self.rows.pop(food_nutrition_id, None)


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository."""

    rows: dict[UUID, _FoodLogRow] = field(default_factory=dict)

    def get_by_id(self, food_log_id: UUID) -> FoodLog | None:
        row = self.rows.get(food_log_id)
        return row.restore() if row else None

    def get_all(self) -> list[FoodLog]:
        return [row.restore() for row in self.rows.values()]

    def get_by_user_id(self, user_id: UUID) -> list[FoodLog]:
        rows = [row for row in self.rows.values() if row.user_id == user_id]
        rows.sort(key=lambda row: row.date_time, reverse=True)
        return [row.restore() for row in rows]

    def add(self, food_log: FoodLog) -> FoodLog:
        self.rows[food_log.id] = _FoodLogRow.of(food_log)
        return food_log

    def update(self, food_log: FoodLog) -> FoodLog:
        self.rows[food_log.id] = _FoodLogRow.of(food_log)
        return food_log

    def delete(self, food_log_id: UUID) -> None:
        self.rows.pop(food_log_id, None)

    def delete_entity(self, food_log: FoodLog) -> None:
        self.delete(food_log.id)

    def delete_by_ids(self, food_log_ids: Iterable[UUID]) -> None:
        for food_log_id in food_log_ids:
            self.delete(food_log_id)

    def delete_all(self) -> None:
        self.rows.clear()

    def references_food_nutrition(self, food_nutrition_id: UUID) -> bool:
        return any(
            item.nutrition.id == food_nutrition_id
            for row in self.rows.values()
            for item in row.items
        )
