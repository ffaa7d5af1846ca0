"""Supabase repository for nutrition facts."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from food_tracker.domain.hydration import restore_food_nutrition
from food_tracker.domain.nutrition import FoodNutrition
from food_tracker.services.nutrition import FoodNutritionRepository

_COLUMNS = "id, name, measurement, carbs, fat, protein, calories"


@dataclass
class SupabaseFoodNutritionRepository(FoodNutritionRepository):
    """Supabase implementation for nutrition facts."""

    client: Client

    def get_by_id(self, food_nutrition_id: UUID) -> FoodNutrition | None:
        """Return nutrition facts by id."""
        response = (
            self.client.table("food_nutrition")
            .select(_COLUMNS)
            .eq("id", str(food_nutrition_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food_nutrition(response.data[0])

    def get_all(self) -> list[FoodNutrition]:
        """Return every nutrition row ordered by name."""
        response = (
            self.client.table("food_nutrition").select(_COLUMNS).order("name").execute()
        )
        return [parse_food_nutrition(row) for row in response.data or []]

    def search_by_name(self, name: str) -> list[FoodNutrition]:
        """Return rows whose name contains the text, ignoring case."""
        response = (
            self.client.table("food_nutrition")
            .select(_COLUMNS)
            .ilike("name", f"%{name}%")
            .order("name")
            .execute()
        )
        return [parse_food_nutrition(row) for row in response.data or []]

    def add(self, food_nutrition: FoodNutrition) -> FoodNutrition:
        """Insert a nutrition row."""
        response = (
            self.client.table("food_nutrition")
            .insert(food_nutrition_payload(food_nutrition))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food nutrition")
        return food_nutrition

    def update(self, food_nutrition: FoodNutrition) -> FoodNutrition:
        """Overwrite a nutrition row."""
        payload = food_nutrition_payload(food_nutrition)
        payload.pop("id")
        self.client.table("food_nutrition").update(payload).eq(
            "id", str(food_nutrition.id)
        ).execute()
        return food_nutrition

    def delete(self, food_nutrition_id: UUID) -> None:
        """Delete a nutrition row."""
        self.client.table("food_nutrition").delete().eq(
            "id", str(food_nutrition_id)
        ).execute()


def food_nutrition_payload(food_nutrition: FoodNutrition) -> dict[str, object]:
    return {
        "id": str(food_nutrition.id),
        "name": food_nutrition.name,
        "measurement": food_nutrition.measurement,
        "carbs": food_nutrition.carbs,
        "fat": food_nutrition.fat,
        "protein": food_nutrition.protein,
        "calories": food_nutrition.calories,
    }


def parse_food_nutrition(row: dict[str, object]) -> FoodNutrition:
    return restore_food_nutrition(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        measurement=str(row["measurement"]),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        protein=float(row.get("protein", 0.0)),
        calories=float(row.get("calories", 0.0)),
    )
