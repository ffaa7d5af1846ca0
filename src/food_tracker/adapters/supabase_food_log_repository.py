"""Supabase repository for food logs.

Each log is one row. Its items live in the ``food_items`` JSON column together
with a copy of the nutrition facts they were logged with, so reading a log
never needs a second query.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from food_tracker.adapters.local_time import utc_offset_minutes, with_utc_offset
from food_tracker.adapters.supabase_food_nutrition_repository import (
    food_nutrition_payload,
)
from food_tracker.domain.errors import NIL_ID
from food_tracker.domain.food_logs import FoodItem, FoodLog
from food_tracker.domain.hydration import (
    restore_food_item,
    restore_food_log,
    restore_food_nutrition,
)
from food_tracker.services.food_logs import FoodLogRepository

_COLUMNS = (
    "id, user_id, date_time, date_time_offset, create_time, update_time, "
    "total_calories, total_carbs, total_protein, total_fat, food_items"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def get_by_id(self, food_log_id: UUID) -> FoodLog | None:
        """Return a food log by id."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("id", str(food_log_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food_log(response.data[0])

    def get_all(self) -> list[FoodLog]:
        """Return every food log, newest date first."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .order("date_time", desc=True)
            .execute()
        )
        return [_parse_food_log(row) for row in response.data or []]

    def get_by_user_id(self, user_id: UUID) -> list[FoodLog]:
        """Return a user's food logs, newest date first."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date_time", desc=True)
            .execute()
        )
        return [_parse_food_log(row) for row in response.data or []]

    def add(self, food_log: FoodLog) -> FoodLog:
        """Insert a food log row."""
        response = (
            self.client.table("food_logs").insert(_food_log_payload(food_log)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")
        return food_log

    def update(self, food_log: FoodLog) -> FoodLog:
        """Overwrite a food log row and its items."""
        payload = _food_log_payload(food_log)
        payload.pop("id")
        self.client.table("food_logs").update(payload).eq(
            "id", str(food_log.id)
        ).execute()
        return food_log

    def delete(self, food_log_id: UUID) -> None:
        """Delete a food log row."""
        self.client.table("food_logs").delete().eq("id", str(food_log_id)).execute()

    def delete_entity(self, food_log: FoodLog) -> None:
        self.delete(food_log.id)

    def delete_by_ids(self, food_log_ids: Iterable[UUID]) -> None:
        """Delete several food log rows in one request."""
        ids = [str(food_log_id) for food_log_id in food_log_ids]
        if ids:
            self.client.table("food_logs").delete().in_("id", ids).execute()

    def delete_all(self) -> None:
        """Delete every food log row."""
        # PostgREST refuses unfiltered deletes.
        self.client.table("food_logs").delete().neq("id", str(NIL_ID)).execute()

    def references_food_nutrition(self, food_nutrition_id: UUID) -> bool:
        """Return True when any stored item uses the nutrition row."""
        response = (
            self.client.table("food_logs")
            .select("id")
            .contains("food_items", [{"food_nutrition_id": str(food_nutrition_id)}])
            .limit(1)
            .execute()
        )
        return bool(response.data)


def _item_payload(item: FoodItem) -> dict[str, object]:
    nutrition = food_nutrition_payload(item.food_nutrition)
    nutrition.pop("id")
    return {
        "id": str(item.id),
        "food_nutrition_id": str(item.food_nutrition_id),
        "unit": item.unit,
        "nutrition": nutrition,
    }


def _food_log_payload(food_log: FoodLog) -> dict[str, object]:
    return {
        "id": str(food_log.id),
        "user_id": str(food_log.user_id),
        "date_time": food_log.date_time.isoformat(),
        "date_time_offset": utc_offset_minutes(food_log.date_time),
        "create_time": food_log.create_time.isoformat(),
        "update_time": food_log.update_time.isoformat(),
        "total_calories": food_log.total_calories,
        "total_carbs": food_log.total_carbs,
        "total_protein": food_log.total_protein,
        "total_fat": food_log.total_fat,
        "food_items": [_item_payload(item) for item in food_log.food_items],
    }


def _parse_item(food_log_id: UUID, data: dict[str, object]) -> FoodItem:
    nutrition = data.get("nutrition") or {}
    food_nutrition = restore_food_nutrition(
        id=UUID(str(data["food_nutrition_id"])),
        name=str(nutrition.get("name", "")),
        measurement=str(nutrition.get("measurement", "")),
        carbs=float(nutrition.get("carbs", 0.0)),
        fat=float(nutrition.get("fat", 0.0)),
        protein=float(nutrition.get("protein", 0.0)),
        calories=float(nutrition.get("calories", 0.0)),
    )
    return restore_food_item(
        id=UUID(str(data["id"])),
        food_nutrition=food_nutrition,
        unit=int(data["unit"]),
        food_log_id=food_log_id,
    )


def _parse_food_log(row: dict[str, object]) -> FoodLog:
    food_log_id = UUID(str(row["id"]))
    return restore_food_log(
        id=food_log_id,
        date_time=_parse_date_time(row),
        user_id=UUID(str(row["user_id"])),
        create_time=datetime.fromisoformat(str(row["create_time"])),
        update_time=datetime.fromisoformat(str(row["update_time"])),
        food_items=[
            _parse_item(food_log_id, item) for item in row.get("food_items") or []
        ],
    )


def _parse_date_time(row: dict[str, object]) -> datetime:
    value = datetime.fromisoformat(str(row["date_time"]))
    if "date_time_offset" not in row:
        return value
    offset = row["date_time_offset"]
    return with_utc_offset(value, None if offset is None else int(offset))
