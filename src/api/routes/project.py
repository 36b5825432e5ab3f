from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.query import sort_field
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects import (
    AddMemberUseCase,
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectByIdUseCase,
    GetProjectMembersUseCase,
    ListProjectsCommand,
    ListProjectsResponse,
    ListProjectsUseCase,
    ProjectActionResponse,
    ProjectDetailResponse,
    ProjectResponse,
    RemoveMemberUseCase,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)
from src.app.use_cases.users import UserSummary
from src.depends import get_current_user_id, get_unit_of_work
from src.domain.entities import SortOrder

router = APIRouter(prefix="/projects", tags=["Project"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ListProjectsResponse)
async def list_projects(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    sort_by: Optional[Literal["name", "createdAt", "updatedAt"]] = Query(
        None, alias="sortBy"
    ),
    sort_order: SortOrder = Query(SortOrder.desc, alias="sortOrder"),
    include_deleted: bool = Query(False, alias="includeDeleted"),
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Projects the authenticated user is a member of."""
    command = ListProjectsCommand(
        limit=limit,
        offset=offset,
        sort_by=sort_field(sort_by, "created_at"),
        sort_order=sort_order,
        include_deleted=include_deleted,
    )

    result = await ListProjectsUseCase(uow).execute(command, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class CreateProjectRequest(BaseModel):
    """Create project HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255, description="Project name")
    slug: str = Field(..., min_length=1, max_length=255, description="Unique URL slug")
    description: Optional[str] = Field(
        None, max_length=5000, description="Project description"
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponse)
async def create_project(
    request: CreateProjectRequest,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a project owned by the authenticated user.

    Raises:
        - 400 Bad Request: Invalid name or description
        - 409 Conflict: Slug already in use
    """
    command = CreateProjectCommand(
        name=request.name, slug=request.slug, description=request.description
    )

    result = await CreateProjectUseCase(uow).execute(command, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectDetailResponse
)
async def get_project(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Project details.

    Raises:
        - 403 Forbidden: Not the creator or a member
        - 404 Not Found: Project missing or deleted
    """
    result = await GetProjectByIdUseCase(uow).execute(project_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{project_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=List[UserSummary],
)
async def get_project_members(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Members of a project, creator included."""
    result = await GetProjectMembersUseCase(uow).execute(project_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateProjectRequest(BaseModel):
    """Update project HTTP request payload. Omitted fields stay unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)


@router.patch(
    "/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse
)
async def update_project(
    project_id: int,
    request: UpdateProjectRequest,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Rename a project or change its description (creator only).

    Raises:
        - 400 Bad Request: Invalid name or description
        - 403 Forbidden: Not the creator
        - 404 Not Found: Project missing or deleted
    """
    command = UpdateProjectCommand(name=request.name, description=request.description)

    result = await UpdateProjectUseCase(uow).execute(project_id, command, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectActionResponse
)
async def delete_project(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Soft-delete a project (creator only)."""
    result = await DeleteProjectUseCase(uow).execute(project_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class AddMemberRequest(BaseModel):
    """Add member HTTP request payload"""

    email: EmailStr = Field(..., description="Email of the user to add")


@router.post(
    "/{project_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=ProjectActionResponse,
)
async def add_member(
    project_id: int,
    request: AddMemberRequest,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add a user to a project (creator only).

    Raises:
        - 400 Bad Request: Creator or existing member, member limit reached
        - 403 Forbidden: Not the creator
        - 404 Not Found: Project or user missing
    """
    result = await AddMemberUseCase(uow).execute(project_id, request.email, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{project_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=ProjectActionResponse,
)
async def remove_member(
    project_id: int,
    email: EmailStr = Query(..., description="Email of the member to remove"),
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove a member from a project (creator only).

    Raises:
        - 400 Bad Request: Not a member, or the creator
        - 403 Forbidden: Not the creator
        - 404 Not Found: Project or user missing
    """
    result = await RemoveMemberUseCase(uow).execute(project_id, email, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
