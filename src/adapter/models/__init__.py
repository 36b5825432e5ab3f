"""
Persistence Models

SQLModel tables backing the repositories. Entities never see these; the
repositories map rows to entities through ``Entity.reconstitute``.
"""

from .person import PersonModel
from .user import UserModel
from .project import ProjectMemberModel, ProjectModel
from .task import TaskAssigneeModel, TaskModel

__all__ = [
    "PersonModel",
    "UserModel",
    "ProjectModel",
    "ProjectMemberModel",
    "TaskModel",
    "TaskAssigneeModel",
]
