"""
Task Use Case DTOs (Data Transfer Objects)

All Command and Response classes for task domain.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.app.use_cases.users.dtos import UserSummary
from src.domain.entities import SortOrder, TaskPriority, TaskStatus


# ============================================================================
# Command DTOs
# ============================================================================


class AssigneeRef(BaseModel):
    """Reference to a user to assign, by username"""

    username: str


class CreateTaskCommand(BaseModel):
    """Command for creating a task"""

    name: str
    project_id: int
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.pending
    priority: TaskPriority = TaskPriority.low
    assign_to: List[AssigneeRef] = Field(default_factory=list)


class UpdateTaskCommand(BaseModel):
    """
    Command for updating a task. Unset fields are left unchanged.

    ``assign_to`` adds the listed users; users already assigned are kept.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assign_to: Optional[List[AssigneeRef]] = None


class ListTasksCommand(BaseModel):
    """Command for listing tasks"""

    project_id: Optional[int] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assigned_user_id: Optional[int] = None
    limit: int = 10
    offset: int = 0
    sort_by: str = "created_at"
    sort_order: SortOrder = SortOrder.desc


# ============================================================================
# Response DTOs
# ============================================================================


class TaskResponse(BaseModel):
    """Response for create task use case"""

    id: int
    name: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    assigned_members: List[AssigneeRef]
    created_at: datetime
    updated_at: Optional[datetime] = None


class UpdateTaskResponse(BaseModel):
    """Response for update task use case"""

    id: int
    name: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    assigned_members: List[AssigneeRef]


class TaskDetailResponse(BaseModel):
    """Response for get task by id use case"""

    id: int
    name: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    project_id: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class TaskSummary(BaseModel):
    """Task entry in list responses"""

    id: int
    name: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    assigned_user_count: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class ListTasksResponse(BaseModel):
    """Response for list tasks use case"""

    tasks: List[TaskSummary]
    total: int


class TaskActionResponse(BaseModel):
    """Response for delete, assign and unassign use cases"""

    id: int
    message: str


class TaskAssignedUsersResponse(BaseModel):
    """Response for get task assigned users use case"""

    users: List[UserSummary]
