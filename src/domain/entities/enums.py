"""
Domain Enums

Enumeration types used across domain entities.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status"""

    pending = "pending"
    in_progress = "in_progress"
    reviewing = "reviewing"
    completed = "completed"
    archived = "archived"


class TaskPriority(str, Enum):
    """Task priority"""

    low = "low"
    medium = "medium"
    high = "high"


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"
