"""Domain error taxonomy."""

import math
from uuid import UUID


class DomainError(Exception):
    """Base class for errors raised by entities and services."""


class ValidationError(DomainError):
    """Raised when an entity receives invalid input."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(f"{entity_type} with identifier '{entity_id}' was not found.")
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConflictError(DomainError):
    """Raised when an operation conflicts with the current stored state."""


class AuthenticationError(DomainError):
    """Raised when credentials do not match a stored user."""


NIL_ID = UUID(int=0)


def require_text(value: str | None, field_name: str) -> str:
    """Return the value if it holds non-whitespace text."""
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty")
    return value


def require_id(value: UUID | None, field_name: str) -> UUID:
    """Return the id if it is present and not the nil UUID."""
    if value is None or value == NIL_ID:
        raise ValidationError(f"{field_name} cannot be empty")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    """Return the value as float if it is finite and zero or greater."""
    if not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a finite number")
    if value < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return float(value)
