"""Statistics service for food logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from food_tracker.domain.errors import NotFoundError
from food_tracker.domain.food_logs import FoodLog
from food_tracker.domain.stats import DailyProgress, DailyTotals
from food_tracker.services.food_logs import FoodLogRepository
from food_tracker.services.users import UserRepository


@dataclass
class StatsService:
    """Service for comparing logged nutrients with a user's targets."""

    food_log_repository: FoodLogRepository
    user_repository: UserRepository

    def get_daily_progress(self, user_id: UUID, day: date) -> DailyProgress:
        """Return the user's totals for a nutritional date."""
        user = self.user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        logs = [
            log
            for log in self.food_log_repository.get_by_user_id(user_id)
            if log.date_time.date() == day
        ]
        return DailyProgress(
            user_id=user_id,
            totals=_aggregate_day(day, logs),
            log_count=len(logs),
            suggested_calories=user.suggested_calories,
            suggested_carbs=user.suggested_carbs,
            suggested_protein=user.suggested_protein,
            suggested_fat=user.suggested_fat,
        )


def _aggregate_day(day: date, logs: list[FoodLog]) -> DailyTotals:
    total = DailyTotals(day=day, calories=0.0, carbs=0.0, protein=0.0, fat=0.0)
    for log in logs:
        total = DailyTotals(
            day=day,
            calories=total.calories + log.total_calories,
            carbs=total.carbs + log.total_carbs,
            protein=total.protein + log.total_protein,
            fat=total.fat + log.total_fat,
        )
    return total
