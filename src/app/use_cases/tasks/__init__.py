"""
Task Use Cases

Task lifecycle and assignment management.
"""

from .create_task_use_case import CreateTaskUseCase
from .get_task_by_id_use_case import GetTaskByIdUseCase
from .list_tasks_use_case import ListTasksUseCase
from .update_task_use_case import UpdateTaskUseCase
from .delete_task_use_case import DeleteTaskUseCase
from .assign_user_to_task_use_case import AssignUserToTaskUseCase
from .unassign_user_from_task_use_case import UnassignUserFromTaskUseCase
from .get_task_assigned_users_use_case import GetTaskAssignedUsersUseCase
from .dtos import (
    AssigneeRef,
    CreateTaskCommand,
    ListTasksCommand,
    ListTasksResponse,
    TaskActionResponse,
    TaskAssignedUsersResponse,
    TaskDetailResponse,
    TaskResponse,
    TaskSummary,
    UpdateTaskCommand,
    UpdateTaskResponse,
)

__all__ = [
    # Use Cases
    "CreateTaskUseCase",
    "GetTaskByIdUseCase",
    "ListTasksUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "AssignUserToTaskUseCase",
    "UnassignUserFromTaskUseCase",
    "GetTaskAssignedUsersUseCase",
    # DTOs - Commands
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "ListTasksCommand",
    # DTOs - Responses
    "TaskResponse",
    "UpdateTaskResponse",
    "TaskDetailResponse",
    "ListTasksResponse",
    "TaskActionResponse",
    "TaskAssignedUsersResponse",
    # DTOs - Nested Models
    "AssigneeRef",
    "TaskSummary",
]
