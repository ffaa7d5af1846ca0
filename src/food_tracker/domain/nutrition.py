"""Nutrition facts for a single unit of food."""

from uuid import UUID, uuid4

from food_tracker.domain.errors import NIL_ID, require_non_negative, require_text


class FoodNutrition:
    """A named food with fixed nutrition facts per one unit of measurement."""

    def __init__(  # noqa: PLR0913
        self,
        id: UUID | None,  # noqa: A002
        name: str,
        measurement: str,
        carbs: float,
        fat: float,
        protein: float,
        calories: float,
    ) -> None:
        self._id = uuid4() if id is None or id == NIL_ID else id
        self._assign(name, measurement, carbs, fat, protein, calories)

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        name: str,
        measurement: str,
        carbs: float,
        fat: float,
        protein: float,
        calories: float,
    ) -> "FoodNutrition":
        """Create nutrition facts with a fresh id."""
        return cls(uuid4(), name, measurement, carbs, fat, protein, calories)

    def update(  # noqa: PLR0913
        self,
        name: str,
        measurement: str,
        carbs: float,
        fat: float,
        protein: float,
        calories: float,
    ) -> None:
        """Replace every attribute after validating the new values."""
        self._assign(name, measurement, carbs, fat, protein, calories)

    def _assign(  # noqa: PLR0913
        self,
        name: str,
        measurement: str,
        carbs: float,
        fat: float,
        protein: float,
        calories: float,
    ) -> None:
        # Validate everything before touching state so a failed update is a no-op.
        name = require_text(name, "Name")
        measurement = require_text(measurement, "Measurement")
        carbs = require_non_negative(carbs, "Carbs")
        fat = require_non_negative(fat, "Fat")
        protein = require_non_negative(protein, "Protein")
        calories = require_non_negative(calories, "Calories")
        self._name = name
        self._measurement = measurement
        self._carbs = carbs
        self._fat = fat
        self._protein = protein
        self._calories = calories

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def measurement(self) -> str:
        return self._measurement

    @property
    def carbs(self) -> float:
        return self._carbs

    @property
    def fat(self) -> float:
        return self._fat

    @property
    def protein(self) -> float:
        return self._protein

    @property
    def calories(self) -> float:
        return self._calories

    def __repr__(self) -> str:
        return f"FoodNutrition(id={self._id!s}, name={self._name!r})"
