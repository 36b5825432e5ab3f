"""
Domain Entities

Pure in-memory entities. Each validates on construction and on every
mutation, raising src.domain.exceptions.ValidationError.
"""

from .enums import SortOrder, TaskPriority, TaskStatus
from .person import Person
from .user import User
from .project import MAX_MEMBERS, Project
from .task import Task

__all__ = [
    # Enums
    "TaskStatus",
    "TaskPriority",
    "SortOrder",
    # Entities
    "Person",
    "User",
    "Project",
    "Task",
    # Constants
    "MAX_MEMBERS",
]
