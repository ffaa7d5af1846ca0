"""Tests for the food log aggregate and its items."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from food_tracker.domain.errors import NIL_ID, NotFoundError, ValidationError
from food_tracker.domain.food_logs import FoodItem, FoodLog
from food_tracker.domain.hydration import restore_food_item, restore_food_log
from tests.conftest import LOG_DATE, make_nutrition


def _assert_totals_match_items(food_log: FoodLog) -> None:
    items = food_log.food_items
    assert food_log.total_calories == pytest.approx(
        sum(item.calculate_calories() for item in items)
    )
    assert food_log.total_carbs == pytest.approx(
        sum(item.calculate_carbs() for item in items)
    )
    assert food_log.total_protein == pytest.approx(
        sum(item.calculate_protein() for item in items)
    )
    assert food_log.total_fat == pytest.approx(
        sum(item.calculate_fat() for item in items)
    )


def test_food_item_calculations_scale_with_unit() -> None:
    apple = make_nutrition()
    item = FoodItem.create(apple.id, 3, uuid4(), apple)

    assert item.calculate_calories() == 156
    assert item.calculate_carbs() == 42
    assert item.calculate_fat() == pytest.approx(0.6)
    assert item.calculate_protein() == pytest.approx(0.9)


@pytest.mark.parametrize("unit", [0, -1])
def test_food_item_rejects_non_positive_unit(unit: int) -> None:
    apple = make_nutrition()
    with pytest.raises(ValidationError, match="Unit must be positive"):
        FoodItem.create(apple.id, unit, uuid4(), apple)


def test_food_item_requires_resolved_matching_nutrition() -> None:
    apple = make_nutrition()
    banana = make_nutrition(name="Banana", calories=89.0)

    with pytest.raises(ValidationError, match="must be resolved"):
        FoodItem.create(apple.id, 1, uuid4(), None)
    with pytest.raises(ValidationError, match="does not match"):
        FoodItem.create(apple.id, 1, uuid4(), banana)


def test_food_item_rejects_nil_ids() -> None:
    apple = make_nutrition()
    with pytest.raises(ValidationError, match="FoodNutritionId cannot be empty"):
        FoodItem.create(NIL_ID, 1, uuid4(), apple)
    with pytest.raises(ValidationError, match="FoodLogId cannot be empty"):
        FoodItem.create(apple.id, 1, NIL_ID, apple)


def test_food_item_update_unit_validates() -> None:
    apple = make_nutrition()
    item = FoodItem.create(apple.id, 1, uuid4(), apple)

    item.update_unit(4)
    with pytest.raises(ValidationError):
        item.update_unit(0)

    assert item.unit == 4


@pytest.mark.parametrize("unit", [True, 2.5, "2"])
def test_food_item_rejects_non_integer_unit(unit: object) -> None:
    apple = make_nutrition()

    with pytest.raises(ValidationError, match="Unit must be a whole number"):
        FoodItem.create(apple.id, unit, uuid4(), apple)  # type: ignore[arg-type]

    item = FoodItem.create(apple.id, 1, uuid4(), apple)
    with pytest.raises(ValidationError, match="Unit must be a whole number"):
        item.update_unit(unit)  # type: ignore[arg-type]
    assert item.unit == 1


def test_new_food_log_starts_empty() -> None:
    food_log = FoodLog(None, LOG_DATE, uuid4())

    assert food_log.id != NIL_ID
    assert food_log.food_items == ()
    assert food_log.total_calories == 0.0
    assert food_log.create_time == food_log.update_time


def test_food_log_requires_user() -> None:
    with pytest.raises(ValidationError, match="UserId cannot be empty"):
        FoodLog(None, LOG_DATE, NIL_ID)


def test_create_and_remove_scenario() -> None:
    apple = make_nutrition()
    banana = make_nutrition(
        name="Banana", carbs=23.0, fat=0.3, protein=1.1, calories=89.0
    )
    food_log = FoodLog(uuid4(), datetime.now(tz=UTC), uuid4())

    apple_item = food_log.add_item_for(apple.id, 2, apple)
    assert food_log.total_calories == 104

    food_log.add_food_item(FoodItem.create(banana.id, 1, food_log.id, banana))
    assert food_log.total_calories == 193
    _assert_totals_match_items(food_log)

    food_log.remove_food_item(apple_item)
    assert food_log.total_calories == 89
    assert [item.food_nutrition.name for item in food_log.food_items] == ["Banana"]
    _assert_totals_match_items(food_log)


def test_add_food_item_rejects_item_of_another_log() -> None:
    apple = make_nutrition()
    food_log = FoodLog(uuid4(), LOG_DATE, uuid4())
    foreign = FoodItem.create(apple.id, 1, uuid4(), apple)

    with pytest.raises(ValidationError):
        food_log.add_food_item(foreign)

    assert food_log.food_items == ()


def test_remove_unknown_item_is_noop_but_touches_log() -> None:
    apple = make_nutrition()
    food_log = FoodLog(uuid4(), LOG_DATE, uuid4())
    food_log.add_item_for(apple.id, 1, apple)
    before = food_log.update_time

    food_log.remove_food_item(FoodItem.create(apple.id, 1, food_log.id, apple))

    assert len(food_log.food_items) == 1
    assert food_log.total_calories == 52
    assert food_log.update_time >= before


def test_clear_food_items_is_idempotent() -> None:
    apple = make_nutrition()
    food_log = FoodLog(uuid4(), LOG_DATE, uuid4())
    food_log.add_item_for(apple.id, 2, apple)

    food_log.clear_food_items()
    food_log.clear_food_items()

    assert food_log.food_items == ()
    assert food_log.total_calories == 0.0
    assert food_log.total_carbs == 0.0
    assert food_log.total_protein == 0.0
    assert food_log.total_fat == 0.0


def test_update_food_item_unit_refreshes_totals() -> None:
    apple = make_nutrition()
    food_log = FoodLog(uuid4(), LOG_DATE, uuid4())
    item = food_log.add_item_for(apple.id, 1, apple)

    food_log.update_food_item_unit(item.id, 3)

    assert food_log.total_calories == 156
    _assert_totals_match_items(food_log)
    with pytest.raises(NotFoundError):
        food_log.update_food_item_unit(uuid4(), 2)


def test_food_items_view_is_read_only() -> None:
    apple = make_nutrition()
    food_log = FoodLog(uuid4(), LOG_DATE, uuid4())
    food_log.add_item_for(apple.id, 1, apple)

    items = food_log.food_items
    assert isinstance(items, tuple)
    assert food_log.find_food_item(items[0].id) is items[0]
    assert food_log.find_food_item(uuid4()) is None


def test_update_date_time_moves_log() -> None:
    food_log = FoodLog(uuid4(), LOG_DATE, uuid4())
    new_date = datetime(2024, 5, 15, 19, 0, tzinfo=UTC)

    food_log.update_date_time(new_date)

    assert food_log.date_time == new_date


def test_update_date_time_advances_update_time() -> None:
    food_log = restore_food_log(
        id=uuid4(),
        date_time=LOG_DATE,
        user_id=uuid4(),
        create_time=LOG_DATE,
        update_time=LOG_DATE,
        food_items=[],
    )

    food_log.update_date_time(LOG_DATE + timedelta(days=1))

    assert food_log.update_time > LOG_DATE
    assert food_log.create_time == LOG_DATE


def test_unit_change_through_items_view_refreshes_totals() -> None:
    apple = make_nutrition()
    food_log = FoodLog(uuid4(), LOG_DATE, uuid4())
    food_log.add_item_for(apple.id, 1, apple)
    before = food_log.update_time

    food_log.food_items[0].update_unit(5)

    assert food_log.total_calories == 260
    assert food_log.update_time >= before
    _assert_totals_match_items(food_log)


def test_restored_items_refresh_their_log() -> None:
    apple = make_nutrition()
    food_log_id = uuid4()
    food_log = restore_food_log(
        id=food_log_id,
        date_time=LOG_DATE,
        user_id=uuid4(),
        create_time=LOG_DATE,
        update_time=LOG_DATE,
        food_items=[
            restore_food_item(
                id=uuid4(), food_nutrition=apple, unit=1, food_log_id=food_log_id
            )
        ],
    )

    food_log.food_items[0].update_unit(3)

    assert food_log.total_calories == 156
    assert food_log.update_time > LOG_DATE


def test_removed_item_no_longer_drives_totals() -> None:
    apple = make_nutrition()
    food_log = FoodLog(uuid4(), LOG_DATE, uuid4())
    removed = food_log.add_item_for(apple.id, 1, apple)
    food_log.add_item_for(apple.id, 2, apple)
    food_log.remove_food_item(removed)

    removed.update_unit(10)

    assert food_log.total_calories == 104
    _assert_totals_match_items(food_log)
