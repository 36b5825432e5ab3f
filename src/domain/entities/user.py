"""
User Entity

Login identity (email, username, password hash) attached to a Person.
"""

import re
from datetime import datetime
from typing import Any, Dict, Optional

from src.domain.base import SoftDeletable, utc_now, validate_id, validate_text
from src.domain.exceptions import ValidationError

from .person import Person

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8


def _validate_email(value: Any) -> str:
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value.strip()):
        raise ValidationError("Valid email is required", field="email")
    return value.strip()


def _validate_username(value: Any) -> str:
    return validate_text(
        value,
        field="username",
        label="Username",
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
        empty_message="Username cannot be empty",
    )


def _validate_password(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError("Password is required", field="password")
    if len(value) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
            field="password",
        )
    return value


class User(SoftDeletable):
    """
    User entity.

    Business Rules:
    - Email matches a basic local@domain.tld shape after trimming
    - Username is trimmed, 3-50 characters
    - ``password`` holds the stored hash; it must be non-empty and at least
      8 characters. Plaintext policy is checked by validate_plain_password
      before hashing.
    - Name accessors proxy to the loaded Person and are None without one
    """

    _entity_label = "User"

    def __init__(
        self,
        id: int,
        email: str,
        username: str,
        password: str,
        person_id: int,
        person: Optional[Person] = None,
        deleted_at: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = validate_id(id)
        self._email = _validate_email(email)
        self._username = _validate_username(username)
        self._password = _validate_password(password)
        self._person_id = validate_id(person_id, field="person_id", label="Person ID")
        self._person = person
        self._deleted_at = deleted_at
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at

    @classmethod
    def create(
        cls, email: str, username: str, password: str, person_id: int
    ) -> "User":
        return cls(
            id=0,
            email=email,
            username=username,
            password=password,
            person_id=person_id,
        )

    @classmethod
    def reconstitute(cls, **data: Any) -> "User":
        return cls(**data)

    @staticmethod
    def validate_plain_password(password: Any) -> str:
        """Check a plaintext password before it is hashed."""
        return _validate_password(password)

    @property
    def id(self) -> int:
        return self._id

    @property
    def email(self) -> str:
        return self._email

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def person_id(self) -> int:
        return self._person_id

    @property
    def person(self) -> Optional[Person]:
        return self._person

    @property
    def first_name(self) -> Optional[str]:
        return self._person.first_name if self._person else None

    @property
    def last_name(self) -> Optional[str]:
        return self._person.last_name if self._person else None

    @property
    def full_name(self) -> Optional[str]:
        return self._person.full_name if self._person else None

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def update_email(self, email: str) -> None:
        self._ensure_not_deleted()
        self._email = _validate_email(email)
        self._touch()

    def update_username(self, username: str) -> None:
        self._ensure_not_deleted()
        self._username = _validate_username(username)
        self._touch()

    def update_password(self, password: str) -> None:
        self._ensure_not_deleted()
        self._password = _validate_password(password)
        self._touch()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "email": self._email,
            "username": self._username,
            "password": self._password,
            "person_id": self._person_id,
            "person": self._person,
            "deleted_at": self._deleted_at,
            "created_at": self._created_at,
            "updated_at": self._updated_at,
        }

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email!r})"
