from datetime import datetime, timezone
from typing import Any, Optional

from src.domain.exceptions import ValidationError


def utc_now() -> datetime:
    """Naive UTC timestamp, the form every entity and table stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def validate_id(value: Any, field: str = "id", label: str = "ID") -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"{label} must be a non-negative integer", field=field)
    return value


def validate_text(
    value: Any,
    field: str,
    label: str,
    max_length: int,
    min_length: int = 1,
    empty_message: Optional[str] = None,
) -> str:
    """
    Trim ``value`` and check its length.

    Returns the trimmed string, raises ValidationError naming ``field``
    otherwise.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(empty_message or f"{label} is required", field=field)
    trimmed = value.strip()
    if len(trimmed) < min_length:
        raise ValidationError(
            f"{label} must be at least {min_length} characters", field=field
        )
    if len(trimmed) > max_length:
        raise ValidationError(
            f"{label} cannot exceed {max_length} characters", field=field
        )
    return trimmed


class SoftDeletable:
    """Shared soft-delete lifecycle for entities with ``deleted_at``."""

    _entity_label = "Entity"

    _deleted_at: Optional[datetime]
    _updated_at: Optional[datetime]

    @property
    def deleted_at(self) -> Optional[datetime]:
        return self._deleted_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    @property
    def is_deleted(self) -> bool:
        return self._deleted_at is not None

    def _ensure_not_deleted(self) -> None:
        if self.is_deleted:
            raise ValidationError(f"Cannot update deleted {self._entity_label.lower()}")

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def delete(self) -> None:
        if self.is_deleted:
            raise ValidationError(f"{self._entity_label} is already deleted")
        now = utc_now()
        self._deleted_at = now
        self._updated_at = now

    def restore(self) -> None:
        if not self.is_deleted:
            raise ValidationError(f"{self._entity_label} is not deleted")
        self._deleted_at = None
        self._touch()
