"""
Person Entity

The human behind a user account: first and last name.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from src.domain.base import SoftDeletable, utc_now, validate_id, validate_text

NAME_MAX_LENGTH = 100


def _validate_first_name(value: Any) -> str:
    return validate_text(
        value,
        field="first_name",
        label="First name",
        max_length=NAME_MAX_LENGTH,
        empty_message="First name cannot be empty",
    )


def _validate_last_name(value: Any) -> str:
    return validate_text(
        value,
        field="last_name",
        label="Last name",
        max_length=NAME_MAX_LENGTH,
        empty_message="Last name cannot be empty",
    )


class Person(SoftDeletable):
    """
    Person entity.

    Business Rules:
    - First and last name are trimmed, non-empty, at most 100 characters
    - Deleted persons cannot be renamed
    - delete() on a deleted person and restore() on an active one fail
    """

    _entity_label = "Person"

    def __init__(
        self,
        id: int,
        first_name: str,
        last_name: str,
        deleted_at: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = validate_id(id)
        self._first_name = _validate_first_name(first_name)
        self._last_name = _validate_last_name(last_name)
        self._deleted_at = deleted_at
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at

    @classmethod
    def create(cls, first_name: str, last_name: str) -> "Person":
        return cls(id=0, first_name=first_name, last_name=last_name)

    @classmethod
    def reconstitute(cls, **data: Any) -> "Person":
        return cls(**data)

    @property
    def id(self) -> int:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def update_first_name(self, first_name: str) -> None:
        self._ensure_not_deleted()
        self._first_name = _validate_first_name(first_name)
        self._touch()

    def update_last_name(self, last_name: str) -> None:
        self._ensure_not_deleted()
        self._last_name = _validate_last_name(last_name)
        self._touch()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "first_name": self._first_name,
            "last_name": self._last_name,
            "deleted_at": self._deleted_at,
            "created_at": self._created_at,
            "updated_at": self._updated_at,
        }

    def __repr__(self) -> str:
        return f"Person(id={self._id}, full_name={self.full_name!r})"
