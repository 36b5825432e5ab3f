from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.query import sort_field
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
    AssigneeRef,
    AssignUserToTaskUseCase,
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskAssignedUsersUseCase,
    GetTaskByIdUseCase,
    ListTasksCommand,
    ListTasksResponse,
    ListTasksUseCase,
    TaskActionResponse,
    TaskAssignedUsersResponse,
    TaskDetailResponse,
    TaskResponse,
    UnassignUserFromTaskUseCase,
    UpdateTaskCommand,
    UpdateTaskResponse,
    UpdateTaskUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work
from src.domain.entities import SortOrder, TaskPriority, TaskStatus

router = APIRouter(prefix="/tasks", tags=["Task"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ListTasksResponse)
async def list_tasks(
    project_id: Optional[int] = Query(None, alias="projectId", ge=1),
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    priority: Optional[TaskPriority] = Query(None),
    assigned_user_id: Optional[int] = Query(None, alias="assignedUserId", ge=1),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    sort_by: Optional[
        Literal["name", "priority", "status", "createdAt", "updatedAt"]
    ] = Query(None, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.desc, alias="sortOrder"),
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Tasks of one project, or of every project the user can see.

    Raises:
        - 403 Forbidden: No access to projectId
        - 404 Not Found: projectId missing or deleted
    """
    command = ListTasksCommand(
        project_id=project_id,
        status=task_status,
        priority=priority,
        assigned_user_id=assigned_user_id,
        limit=limit,
        offset=offset,
        sort_by=sort_field(sort_by, "created_at"),
        sort_order=sort_order,
    )

    result = await ListTasksUseCase(uow).execute(command, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class AssigneeRequest(BaseModel):
    username: str = Field(..., min_length=1)


class CreateTaskRequest(BaseModel):
    """Create task HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255, description="Task name")
    description: Optional[str] = Field(None, max_length=5000)
    status: TaskStatus = Field(TaskStatus.pending, description="Defaults to pending")
    priority: TaskPriority = Field(TaskPriority.low, description="Defaults to low")
    project_id: int = Field(..., ge=1, description="Project the task belongs to")
    assign_to: List[AssigneeRequest] = Field(
        default_factory=list, description="Project members to assign, by username"
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskResponse)
async def create_task(
    request: CreateTaskRequest,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a task in a project the user can see.

    Raises:
        - 400 Bad Request: Invalid fields, assignee not a project member
        - 403 Forbidden: No access to the project
        - 404 Not Found: Project or assignee missing
    """
    command = CreateTaskCommand(
        name=request.name,
        description=request.description,
        status=request.status,
        priority=request.priority,
        project_id=request.project_id,
        assign_to=[AssigneeRef(username=a.username) for a in request.assign_to],
    )

    result = await CreateTaskUseCase(uow).execute(command, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskDetailResponse)
async def get_task(
    task_id: int,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Task details."""
    result = await GetTaskByIdUseCase(uow).execute(task_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateTaskRequest(BaseModel):
    """Update task HTTP request payload. Omitted fields stay unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assign_to: Optional[List[AssigneeRequest]] = None


@router.patch("/{task_id}", status_code=status.HTTP_200_OK, response_model=UpdateTaskResponse)
async def update_task(
    task_id: int,
    request: UpdateTaskRequest,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update task fields and add assignees.

    Raises:
        - 400 Bad Request: Invalid fields, archived task, assignee not a member
        - 403 Forbidden: No access to the project
        - 404 Not Found: Task, project or assignee missing
    """
    command = UpdateTaskCommand(
        name=request.name,
        description=request.description,
        status=request.status,
        priority=request.priority,
        assign_to=(
            [AssigneeRef(username=a.username) for a in request.assign_to]
            if request.assign_to is not None
            else None
        ),
    )

    result = await UpdateTaskUseCase(uow).execute(task_id, command, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskActionResponse)
async def delete_task(
    task_id: int,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Soft-delete a task (project creator only)."""
    result = await DeleteTaskUseCase(uow).execute(task_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{task_id}/assigned-users",
    status_code=status.HTTP_200_OK,
    response_model=TaskAssignedUsersResponse,
)
async def get_task_assigned_users(
    task_id: int,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Users assigned to a task."""
    result = await GetTaskAssignedUsersUseCase(uow).execute(task_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class AssignUserRequest(BaseModel):
    """Assign user HTTP request payload"""

    email: EmailStr = Field(..., description="Email of the user to assign")


@router.post(
    "/{task_id}/assign", status_code=status.HTTP_200_OK, response_model=TaskActionResponse
)
async def assign_user(
    task_id: int,
    request: AssignUserRequest,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Assign a project member to a task.

    Raises:
        - 400 Bad Request: Not a project member, already assigned, archived task
        - 403 Forbidden: No access to the project
        - 404 Not Found: Task, project or user missing
    """
    result = await AssignUserToTaskUseCase(uow).execute(task_id, request.email, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{task_id}/unassign/{email}",
    status_code=status.HTTP_200_OK,
    response_model=TaskActionResponse,
)
async def unassign_user(
    task_id: int,
    email: EmailStr,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove a user from a task.

    Raises:
        - 400 Bad Request: User not assigned, archived task
        - 403 Forbidden: No access to the project
        - 404 Not Found: Task, project or user missing
    """
    result = await UnassignUserFromTaskUseCase(uow).execute(task_id, email, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
