"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from food_tracker.domain.hydration import restore_user
from food_tracker.domain.users import User
from food_tracker.services.users import UserRepository

_COLUMNS = (
    "id, name, email, password, suggested_calories, suggested_carbs, "
    "suggested_fat, suggested_protein"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> User | None:
        """Return the user with the given id, if present."""
        return self._first("id", str(user_id))

    def get_by_email(self, email: str) -> User | None:
        """Return the user with the given email, if present."""
        return self._first("email", email)

    def get_by_username(self, name: str) -> User | None:
        """Return the user with the given name, if present."""
        return self._first("name", name)

    def get_all(self) -> list[User]:
        """Return every user ordered by name."""
        response = (
            self.client.table("users").select(_COLUMNS).order("name").execute()
        )
        return [_parse_user(row) for row in response.data or []]

    def add(self, user: User) -> User:
        """Insert a user row."""
        response = self.client.table("users").insert(_user_payload(user)).execute()
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return user

    def update(self, user: User) -> User:
        """Overwrite a user row."""
        payload = _user_payload(user)
        payload.pop("id")
        self.client.table("users").update(payload).eq("id", str(user.id)).execute()
        return user

    def delete(self, user_id: UUID) -> None:
        """Delete a user row."""
        self.client.table("users").delete().eq("id", str(user_id)).execute()

    def _first(self, column: str, value: str) -> User | None:
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _user_payload(user: User) -> dict[str, object]:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "password": user.password,
        "suggested_calories": user.suggested_calories,
        "suggested_carbs": user.suggested_carbs,
        "suggested_fat": user.suggested_fat,
        "suggested_protein": user.suggested_protein,
    }


def _parse_user(row: dict[str, object]) -> User:
    return restore_user(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        email=str(row["email"]),
        password=str(row["password"]),
        suggested_calories=float(row.get("suggested_calories", 0.0)),
        suggested_carbs=float(row.get("suggested_carbs", 0.0)),
        suggested_fat=float(row.get("suggested_fat", 0.0)),
        suggested_protein=float(row.get("suggested_protein", 0.0)),
    )
