"""User entity with personal nutrition targets."""

from uuid import UUID, uuid4

from food_tracker.domain.errors import NIL_ID, require_non_negative, require_text
from food_tracker.domain.food_logs import FoodLog

DEFAULT_SUGGESTED_CALORIES = 2000.0
DEFAULT_SUGGESTED_CARBS = 246.0
DEFAULT_SUGGESTED_FAT = 68.0
DEFAULT_SUGGESTED_PROTEIN = 215.0


class User:
    """A registered user.

    ``password`` holds whatever the credential verifier produced when the user
    was created or last changed their password.
    """

    def __init__(  # noqa: PLR0913
        self,
        id: UUID | None,  # noqa: A002
        name: str,
        email: str,
        password: str,
        suggested_calories: float = DEFAULT_SUGGESTED_CALORIES,
        suggested_carbs: float = DEFAULT_SUGGESTED_CARBS,
        suggested_fat: float = DEFAULT_SUGGESTED_FAT,
        suggested_protein: float = DEFAULT_SUGGESTED_PROTEIN,
    ) -> None:
        name = require_text(name, "Name")
        email = require_text(email, "Email")
        password = require_text(password, "Password")
        self._id = uuid4() if id is None or id == NIL_ID else id
        self._name = name
        self._email = email
        self._password = password
        self._food_logs: list[FoodLog] = []
        self._set_goals(
            suggested_calories, suggested_carbs, suggested_fat, suggested_protein
        )

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        name: str,
        email: str,
        password: str,
        suggested_calories: float = DEFAULT_SUGGESTED_CALORIES,
        suggested_carbs: float = DEFAULT_SUGGESTED_CARBS,
        suggested_fat: float = DEFAULT_SUGGESTED_FAT,
        suggested_protein: float = DEFAULT_SUGGESTED_PROTEIN,
    ) -> "User":
        """Create a user with a fresh id."""
        return cls(
            uuid4(),
            name,
            email,
            password,
            suggested_calories,
            suggested_carbs,
            suggested_fat,
            suggested_protein,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password(self) -> str:
        return self._password

    @property
    def suggested_calories(self) -> float:
        return self._suggested_calories

    @property
    def suggested_carbs(self) -> float:
        return self._suggested_carbs

    @property
    def suggested_fat(self) -> float:
        return self._suggested_fat

    @property
    def suggested_protein(self) -> float:
        return self._suggested_protein

    @property
    def food_logs(self) -> tuple[FoodLog, ...]:
        return tuple(self._food_logs)

    def update_name(self, name: str) -> None:
        self._name = require_text(name, "Name")

    def update_email(self, email: str) -> None:
        self._email = require_text(email, "Email")

    def update_password(self, password: str) -> None:
        self._password = require_text(password, "Password")

    def update_nutritional_goals(
        self,
        suggested_calories: float,
        suggested_carbs: float,
        suggested_fat: float,
        suggested_protein: float,
    ) -> None:
        """Replace all four daily targets."""
        self._set_goals(
            suggested_calories, suggested_carbs, suggested_fat, suggested_protein
        )

    def update_profile(  # noqa: PLR0913
        self,
        name: str,
        suggested_calories: float,
        suggested_carbs: float,
        suggested_fat: float,
        suggested_protein: float,
    ) -> None:
        """Replace the display name and targets together."""
        name = require_text(name, "Name")
        self._set_goals(
            suggested_calories, suggested_carbs, suggested_fat, suggested_protein
        )
        self._name = name

    def add_food_log(self, food_log: FoodLog) -> None:
        """Attach a log to the in-memory association only."""
        self._food_logs.append(food_log)

    def _set_goals(
        self,
        suggested_calories: float,
        suggested_carbs: float,
        suggested_fat: float,
        suggested_protein: float,
    ) -> None:
        calories = require_non_negative(suggested_calories, "SuggestedCalories")
        carbs = require_non_negative(suggested_carbs, "SuggestedCarbs")
        fat = require_non_negative(suggested_fat, "SuggestedFat")
        protein = require_non_negative(suggested_protein, "SuggestedProtein")
        self._suggested_calories = calories
        self._suggested_carbs = carbs
        self._suggested_fat = fat
        self._suggested_protein = protein

    def __repr__(self) -> str:
        return f"User(id={self._id!s}, name={self._name!r})"
