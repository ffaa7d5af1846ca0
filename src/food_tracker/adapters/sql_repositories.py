"""SQLAlchemy repositories for the relational backend."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.orm import Session, selectinload, sessionmaker

from food_tracker.adapters.local_time import utc_offset_minutes, with_utc_offset
from food_tracker.adapters.sql_models import (
    FoodItemRow,
    FoodLogRow,
    FoodNutritionRow,
    UserRow,
)
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


@dataclass
class SqlUserRepository(UserRepository):
    """SQLAlchemy implementation for user persistence."""

    session_factory: sessionmaker[Session]

    def get_by_id(self, user_id: UUID) -> User | None:
        with self.session_factory() as session:
            row = session.get(UserRow, user_id)
            return _user_from_row(row) if row else None

    def get_by_email(self, email: str) -> User | None:
        return self._first(select(UserRow).where(UserRow.email == email))

    def get_by_username(self, name: str) -> User | None:
        return self._first(select(UserRow).where(UserRow.name == name))

    def get_all(self) -> list[User]:
        with self.session_factory() as session:
            rows = session.scalars(select(UserRow).order_by(UserRow.name)).all()
            return [_user_from_row(row) for row in rows]

    def add(self, user: User) -> User:
        with self.session_factory.begin() as session:
            row = UserRow(id=user.id)
            _copy_user(user, row)
            session.add(row)
        return user

    def update(self, user: User) -> User:
        with self.session_factory.begin() as session:
            row = session.get(UserRow, user.id)
            if row is None:
                row = UserRow(id=user.id)
                session.add(row)
            _copy_user(user, row)
        return user

    def delete(self, user_id: UUID) -> None:
        with self.session_factory.begin() as session:
            session.execute(delete(UserRow).where(UserRow.id == user_id))

    def _first(self, statement) -> User | None:  # type: ignore[no-untyped-def]
        with self.session_factory() as session:
            row = session.scalars(statement.limit(1)).first()
            return _user_from_row(row) if row else None


@dataclass
class SqlFoodNutritionRepository(FoodNutritionRepository):
    """SQLAlchemy implementation for nutrition facts."""

    session_factory: sessionmaker[Session]

    def get_by_id(self, food_nutrition_id: UUID) -> FoodNutrition | None:
        with self.session_factory() as session:
            row = session.get(FoodNutritionRow, food_nutrition_id)
            return _nutrition_from_row(row) if row else None

    def get_all(self) -> list[FoodNutrition]:
        with self.session_factory() as session:
            rows = session.scalars(
                select(FoodNutritionRow).order_by(FoodNutritionRow.name)
            ).all()
            return [_nutrition_from_row(row) for row in rows]

    def search_by_name(self, name: str) -> list[FoodNutrition]:
        with self.session_factory() as session:
            rows = session.scalars(
                select(FoodNutritionRow)
                .where(FoodNutritionRow.name.ilike(f"%{name}%"))
                .order_by(FoodNutritionRow.name)
            ).all()
            return [_nutrition_from_row(row) for row in rows]

    def add(self, food_nutrition: FoodNutrition) -> FoodNutrition:
        with self.session_factory.begin() as session:
            row = FoodNutritionRow(id=food_nutrition.id)
            _copy_nutrition(food_nutrition, row)
            session.add(row)
        return food_nutrition

    def update(self, food_nutrition: FoodNutrition) -> FoodNutrition:
        with self.session_factory.begin() as session:
            row = session.get(FoodNutritionRow, food_nutrition.id)
            if row is None:
                row = FoodNutritionRow(id=food_nutrition.id)
                session.add(row)
            _copy_nutrition(food_nutrition, row)
        return food_nutrition

    def delete(self, food_nutrition_id: UUID) -> None:
        with self.session_factory.begin() as session:
            session.execute(
                delete(FoodNutritionRow).where(FoodNutritionRow.id == food_nutrition_id)
            )


@dataclass
class SqlFoodLogRepository(FoodLogRepository):
    """SQLAlchemy implementation for food logs and their items."""

    session_factory: sessionmaker[Session]

    def get_by_id(self, food_log_id: UUID) -> FoodLog | None:
        with self.session_factory() as session:
            row = session.scalars(
                _food_log_query().where(FoodLogRow.id == food_log_id)
            ).first()
            return _food_log_from_row(row) if row else None

    def get_all(self) -> list[FoodLog]:
        with self.session_factory() as session:
            rows = session.scalars(
                _food_log_query().order_by(FoodLogRow.date_time.desc())
            ).all()
            return [_food_log_from_row(row) for row in rows]

    def get_by_user_id(self, user_id: UUID) -> list[FoodLog]:
        with self.session_factory() as session:
            rows = session.scalars(
                _food_log_query()
                .where(FoodLogRow.user_id == user_id)
                .order_by(FoodLogRow.date_time.desc())
            ).all()
            return [_food_log_from_row(row) for row in rows]

    def add(self, food_log: FoodLog) -> FoodLog:
        with self.session_factory.begin() as session:
            row = FoodLogRow(id=food_log.id, user_id=food_log.user_id)
            _copy_food_log(food_log, row)
            session.add(row)
        return food_log

    def update(self, food_log: FoodLog) -> FoodLog:
        with self.session_factory.begin() as session:
            row = session.scalars(
                _food_log_query().where(FoodLogRow.id == food_log.id)
            ).first()
            if row is None:
                row = FoodLogRow(id=food_log.id, user_id=food_log.user_id)
                session.add(row)
            _copy_food_log(food_log, row)
        return food_log

    def delete(self, food_log_id: UUID) -> None:
        self.delete_by_ids([food_log_id])

    def delete_entity(self, food_log: FoodLog) -> None:
        self.delete(food_log.id)

    def delete_by_ids(self, food_log_ids: Iterable[UUID]) -> None:
        ids = list(food_log_ids)
        if not ids:
            return
        with self.session_factory.begin() as session:
            session.execute(delete(FoodItemRow).where(FoodItemRow.food_log_id.in_(ids)))
            session.execute(delete(FoodLogRow).where(FoodLogRow.id.in_(ids)))

    def delete_all(self) -> None:
        with self.session_factory.begin() as session:
            session.execute(delete(FoodItemRow))
            session.execute(delete(FoodLogRow))

    def references_food_nutrition(self, food_nutrition_id: UUID) -> bool:
        with self.session_factory() as session:
            return bool(
                session.scalar(
                    select(
                        exists().where(
                            FoodItemRow.food_nutrition_id == food_nutrition_id
                        )
                    )
                )
            )


def _food_log_query():  # type: ignore[no-untyped-def]
    return select(FoodLogRow).options(
        selectinload(FoodLogRow.items).joinedload(FoodItemRow.food_nutrition)
    )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are always UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC)


def _user_from_row(row: UserRow) -> User:
    return restore_user(
        id=row.id,
        name=row.name,
        email=row.email,
        password=row.password,
        suggested_calories=row.suggested_calories,
        suggested_carbs=row.suggested_carbs,
        suggested_fat=row.suggested_fat,
        suggested_protein=row.suggested_protein,
    )


def _copy_user(user: User, row: UserRow) -> None:
    row.name = user.name
    row.email = user.email
    row.password = user.password
    row.suggested_calories = user.suggested_calories
    row.suggested_carbs = user.suggested_carbs
    row.suggested_fat = user.suggested_fat
    row.suggested_protein = user.suggested_protein


def _nutrition_from_row(row: FoodNutritionRow) -> FoodNutrition:
    return restore_food_nutrition(
        id=row.id,
        name=row.name,
        measurement=row.measurement,
        carbs=row.carbs,
        fat=row.fat,
        protein=row.protein,
        calories=row.calories,
    )


def _copy_nutrition(food_nutrition: FoodNutrition, row: FoodNutritionRow) -> None:
    row.name = food_nutrition.name
    row.measurement = food_nutrition.measurement
    row.carbs = food_nutrition.carbs
    row.fat = food_nutrition.fat
    row.protein = food_nutrition.protein
    row.calories = food_nutrition.calories


def _food_log_from_row(row: FoodLogRow) -> FoodLog:
    return restore_food_log(
        id=row.id,
        date_time=with_utc_offset(row.date_time, row.date_time_offset),
        user_id=row.user_id,
        create_time=_as_utc(row.create_time),
        update_time=_as_utc(row.update_time),
        food_items=[
            restore_food_item(
                id=item.id,
                food_nutrition=_nutrition_from_row(item.food_nutrition),
                unit=item.unit,
                food_log_id=row.id,
            )
            for item in row.items
        ],
    )


def _copy_food_log(food_log: FoodLog, row: FoodLogRow) -> None:
    row.date_time = _to_utc(food_log.date_time)
    row.date_time_offset = utc_offset_minutes(food_log.date_time)
    row.create_time = _to_utc(food_log.create_time)
    row.update_time = _to_utc(food_log.update_time)
    row.total_calories = food_log.total_calories
    row.total_carbs = food_log.total_carbs
    row.total_protein = food_log.total_protein
    row.total_fat = food_log.total_fat
    existing = {item.id: item for item in row.items}
    items: list[FoodItemRow] = []
    for position, food_item in enumerate(food_log.food_items):
        item_row = existing.get(food_item.id) or FoodItemRow(id=food_item.id)
        item_row.food_nutrition_id = food_item.food_nutrition_id
        item_row.unit = food_item.unit
        item_row.position = position
        items.append(item_row)
    row.items = items
