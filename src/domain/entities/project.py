"""
Project Entity

A named workspace with a creator, an ordered member list and the ids of the
tasks that belong to it.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from src.domain.base import SoftDeletable, utc_now, validate_id, validate_text
from src.domain.exceptions import ValidationError

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 5000
MAX_MEMBERS = 20


def _validate_name(value: Any) -> str:
    return validate_text(
        value, field="name", label="Project name", max_length=NAME_MAX_LENGTH
    )


def _validate_description(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    trimmed = value.strip()
    if len(trimmed) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Project description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )
    return trimmed


def _unique(ids: Iterable[int]) -> List[int]:
    seen: List[int] = []
    for item in ids:
        if item not in seen:
            seen.append(item)
    return seen


class Project(SoftDeletable):
    """
    Project entity.

    Business Rules:
    - Name is trimmed, 1-255 characters; description at most 5000
    - The creator is always a member and cannot be removed
    - At most 20 members
    - Only the creator may edit or delete; creator and members may view
    - Deleted projects reject every mutation
    """

    _entity_label = "Project"

    def __init__(
        self,
        id: int,
        name: str,
        slug: str,
        created_by_id: int,
        description: Optional[str] = None,
        member_ids: Optional[List[int]] = None,
        task_ids: Optional[List[int]] = None,
        deleted_at: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = validate_id(id)
        self._name = _validate_name(name)
        self._description = _validate_description(description)
        self._slug = slug
        self._created_by_id = validate_id(
            created_by_id, field="created_by_id", label="Creator ID"
        )
        self._member_ids = _unique(member_ids or [])
        self._task_ids = _unique(task_ids or [])
        self._deleted_at = deleted_at
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        name: str,
        slug: str,
        created_by_id: int,
        description: Optional[str] = None,
    ) -> "Project":
        now = utc_now()
        return cls(
            id=0,
            name=name,
            slug=slug,
            created_by_id=created_by_id,
            description=description,
            member_ids=[created_by_id],
            task_ids=[],
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(cls, **data: Any) -> "Project":
        return cls(**data)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def slug(self) -> str:
        return self._slug

    @property
    def created_by_id(self) -> int:
        return self._created_by_id

    @property
    def member_ids(self) -> List[int]:
        return list(self._member_ids)

    @property
    def task_ids(self) -> List[int]:
        return list(self._task_ids)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def member_count(self) -> int:
        return len(self._member_ids)

    @property
    def task_count(self) -> int:
        return len(self._task_ids)

    # Permission predicates

    def is_creator(self, user_id: int) -> bool:
        return self._created_by_id == user_id

    def has_member(self, user_id: int) -> bool:
        return user_id in self._member_ids

    def can_user_view(self, user_id: int) -> bool:
        return self.is_creator(user_id) or self.has_member(user_id)

    def can_user_edit(self, user_id: int) -> bool:
        return self.is_creator(user_id)

    def can_user_delete(self, user_id: int) -> bool:
        return self.is_creator(user_id)

    def can_add_member(self) -> bool:
        return len(self._member_ids) < MAX_MEMBERS

    # Mutators

    def add_member(self, user_id: int) -> None:
        self._ensure_not_deleted()
        if self.has_member(user_id):
            raise ValidationError("User is already a member")
        if not self.can_add_member():
            raise ValidationError("Project has reached maximum member limit")
        self._member_ids.append(user_id)
        self._touch()

    def remove_member(self, user_id: int) -> None:
        self._ensure_not_deleted()
        if not self.has_member(user_id):
            raise ValidationError("User is not a member")
        if self.is_creator(user_id):
            raise ValidationError("Project creator must always be a member")
        self._member_ids.remove(user_id)
        self._touch()

    def add_task(self, task_id: int) -> None:
        self._ensure_not_deleted()
        if task_id in self._task_ids:
            raise ValidationError("Task already belongs to this project")
        self._task_ids.append(task_id)
        self._touch()

    def remove_task(self, task_id: int) -> None:
        self._ensure_not_deleted()
        if task_id in self._task_ids:
            self._task_ids.remove(task_id)
            self._touch()

    def update_name(self, name: str) -> None:
        self._ensure_not_deleted()
        self._name = _validate_name(name)
        self._touch()

    def update_description(self, description: Optional[str]) -> None:
        self._ensure_not_deleted()
        self._description = _validate_description(description)
        self._touch()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "name": self._name,
            "slug": self._slug,
            "created_by_id": self._created_by_id,
            "description": self._description,
            "member_ids": list(self._member_ids),
            "task_ids": list(self._task_ids),
            "deleted_at": self._deleted_at,
            "created_at": self._created_at,
            "updated_at": self._updated_at,
        }

    def __repr__(self) -> str:
        return f"Project(id={self._id}, slug={self._slug!r})"
