"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class DailyTotals:
    """Daily total nutrients."""

    day: date
    calories: float
    carbs: float
    protein: float
    fat: float


@dataclass(frozen=True)
class DailyProgress:
    """Daily totals next to the user's targets."""

    user_id: UUID
    totals: DailyTotals
    log_count: int
    suggested_calories: float
    suggested_carbs: float
    suggested_protein: float
    suggested_fat: float

    @property
    def remaining_calories(self) -> float:
        return self.suggested_calories - self.totals.calories

    @property
    def remaining_carbs(self) -> float:
        return self.suggested_carbs - self.totals.carbs

    @property
    def remaining_protein(self) -> float:
        return self.suggested_protein - self.totals.protein

    @property
    def remaining_fat(self) -> float:
        return self.suggested_fat - self.totals.fat
