"""
Task Entity

A unit of work inside a project with a status, a priority and a set of
assigned users.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from src.domain.base import SoftDeletable, utc_now, validate_id, validate_text
from src.domain.exceptions import ValidationError

from .enums import TaskPriority, TaskStatus

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 5000


def _validate_name(value: Any) -> str:
    return validate_text(
        value, field="name", label="Task name", max_length=NAME_MAX_LENGTH
    )


def _validate_description(value: Optional[str]) -> Optional[str]:
    # Empty strings pass through; whitespace-only text does not.
    if not value:
        return value
    return validate_text(
        value,
        field="description",
        label="Task description",
        max_length=DESCRIPTION_MAX_LENGTH,
    )


def _validate_status(value: Union[str, TaskStatus]) -> TaskStatus:
    try:
        return TaskStatus(value)
    except ValueError:
        raise ValidationError("Invalid task status", field="status")


def _validate_priority(value: Union[str, TaskPriority]) -> TaskPriority:
    try:
        return TaskPriority(value)
    except ValueError:
        raise ValidationError("Invalid task priority", field="priority")


class Task(SoftDeletable):
    """
    Task entity.

    State machine:
        pending -> in_progress -> reviewing -> completed -> archived
        in_progress -> completed
        archived -> completed (unarchive)

    update_status() bypasses the transition guards, except that an archived
    task only accepts ``archived``. Deleted or archived tasks reject edits to
    name, description, priority and assignments.
    """

    _entity_label = "Task"

    def __init__(
        self,
        id: int,
        name: str,
        project_id: int,
        description: Optional[str] = None,
        status: Union[str, TaskStatus] = TaskStatus.pending,
        priority: Union[str, TaskPriority] = TaskPriority.low,
        assigned_user_ids: Optional[List[int]] = None,
        deleted_at: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = validate_id(id)
        self._name = _validate_name(name)
        self._description = _validate_description(description)
        self._status = _validate_status(status)
        self._priority = _validate_priority(priority)
        self._project_id = validate_id(
            project_id, field="project_id", label="Project ID"
        )
        self._assigned_user_ids: List[int] = []
        for user_id in assigned_user_ids or []:
            if user_id not in self._assigned_user_ids:
                self._assigned_user_ids.append(user_id)
        self._deleted_at = deleted_at
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        name: str,
        project_id: int,
        description: Optional[str] = None,
        status: Union[str, TaskStatus] = TaskStatus.pending,
        priority: Union[str, TaskPriority] = TaskPriority.low,
        assigned_user_ids: Optional[List[int]] = None,
    ) -> "Task":
        now = utc_now()
        return cls(
            id=0,
            name=name,
            project_id=project_id,
            description=description,
            status=status,
            priority=priority,
            assigned_user_ids=assigned_user_ids,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(cls, **data: Any) -> "Task":
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
    def status(self) -> TaskStatus:
        return self._status

    @property
    def priority(self) -> TaskPriority:
        return self._priority

    @property
    def project_id(self) -> int:
        return self._project_id

    @property
    def assigned_user_ids(self) -> List[int]:
        return list(self._assigned_user_ids)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_pending(self) -> bool:
        return self._status == TaskStatus.pending

    @property
    def is_in_progress(self) -> bool:
        return self._status == TaskStatus.in_progress

    @property
    def is_reviewing(self) -> bool:
        return self._status == TaskStatus.reviewing

    @property
    def is_completed(self) -> bool:
        return self._status == TaskStatus.completed

    @property
    def is_archived(self) -> bool:
        return self._status == TaskStatus.archived

    @property
    def is_high_priority(self) -> bool:
        return self._priority == TaskPriority.high

    @property
    def is_medium_priority(self) -> bool:
        return self._priority == TaskPriority.medium

    @property
    def is_low_priority(self) -> bool:
        return self._priority == TaskPriority.low

    @property
    def assigned_user_count(self) -> int:
        return len(self._assigned_user_ids)

    def is_assigned_to_user(self, user_id: int) -> bool:
        return user_id in self._assigned_user_ids

    def can_be_started(self) -> bool:
        return self.is_pending and not self.is_deleted

    def can_be_completed(self) -> bool:
        return (self.is_in_progress or self.is_reviewing) and not self.is_deleted

    def can_be_archived(self) -> bool:
        return self.is_completed and not self.is_deleted

    def _ensure_editable(self) -> None:
        self._ensure_not_deleted()
        if self.is_archived:
            raise ValidationError("Cannot update archived task")

    # Assignment

    def assign_user(self, user_id: int) -> None:
        self._ensure_editable()
        if self.is_assigned_to_user(user_id):
            raise ValidationError("User is already assigned to this task")
        self._assigned_user_ids.append(user_id)
        self._touch()

    def unassign_user(self, user_id: int) -> None:
        self._ensure_editable()
        if not self.is_assigned_to_user(user_id):
            raise ValidationError("User is not assigned to this task")
        self._assigned_user_ids.remove(user_id)
        self._touch()

    # Field updates

    def update_name(self, name: str) -> None:
        self._ensure_editable()
        self._name = _validate_name(name)
        self._touch()

    def update_description(self, description: Optional[str]) -> None:
        self._ensure_editable()
        self._description = _validate_description(description)
        self._touch()

    def update_priority(self, priority: Union[str, TaskPriority]) -> None:
        self._ensure_editable()
        self._priority = _validate_priority(priority)
        self._touch()

    def update_status(self, status: Union[str, TaskStatus]) -> None:
        self._ensure_not_deleted()
        new_status = _validate_status(status)
        if self.is_archived and new_status != TaskStatus.archived:
            raise ValidationError(
                "Cannot change status of archived task. Unarchive first."
            )
        self._status = new_status
        self._touch()

    # Transitions

    def start(self) -> None:
        if not self.can_be_started():
            raise ValidationError("Task cannot be started")
        self._status = TaskStatus.in_progress
        self._touch()

    def move_to_review(self) -> None:
        if not self.is_in_progress:
            raise ValidationError("Only in-progress tasks can be moved to review")
        self._ensure_not_deleted()
        self._status = TaskStatus.reviewing
        self._touch()

    def complete(self) -> None:
        if not self.can_be_completed():
            raise ValidationError("Task cannot be completed")
        self._status = TaskStatus.completed
        self._touch()

    def archive(self) -> None:
        if not self.can_be_archived():
            raise ValidationError("Only completed tasks can be archived")
        self._status = TaskStatus.archived
        self._touch()

    def unarchive(self) -> None:
        if not self.is_archived:
            raise ValidationError("Task is not archived")
        if self.is_deleted:
            raise ValidationError("Cannot unarchive deleted task")
        self._status = TaskStatus.completed
        self._touch()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "name": self._name,
            "project_id": self._project_id,
            "description": self._description,
            "status": self._status,
            "priority": self._priority,
            "assigned_user_ids": list(self._assigned_user_ids),
            "deleted_at": self._deleted_at,
            "created_at": self._created_at,
            "updated_at": self._updated_at,
        }

    def __repr__(self) -> str:
        return f"Task(id={self._id}, status={self._status.value})"
