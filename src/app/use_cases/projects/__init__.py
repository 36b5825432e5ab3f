"""
Project Use Cases

Project lifecycle and membership management.
"""

from .create_project_use_case import CreateProjectUseCase
from .get_project_by_id_use_case import GetProjectByIdUseCase
from .list_projects_use_case import ListProjectsUseCase
from .update_project_use_case import UpdateProjectUseCase
from .delete_project_use_case import DeleteProjectUseCase
from .get_project_members_use_case import GetProjectMembersUseCase
from .add_member_use_case import AddMemberUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .dtos import (
    CreateProjectCommand,
    ListProjectsCommand,
    ListProjectsResponse,
    ProjectActionResponse,
    ProjectDetailResponse,
    ProjectResponse,
    ProjectSummary,
    UpdateProjectCommand,
)

__all__ = [
    # Use Cases
    "CreateProjectUseCase",
    "GetProjectByIdUseCase",
    "ListProjectsUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "GetProjectMembersUseCase",
    "AddMemberUseCase",
    "RemoveMemberUseCase",
    # DTOs - Commands
    "CreateProjectCommand",
    "UpdateProjectCommand",
    "ListProjectsCommand",
    # DTOs - Responses
    "ProjectResponse",
    "ProjectDetailResponse",
    "ListProjectsResponse",
    "ProjectActionResponse",
    # DTOs - Nested Models
    "ProjectSummary",
]
