"""
Project Use Case DTOs (Data Transfer Objects)

All Command and Response classes for project domain.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import SortOrder


# ============================================================================
# Command DTOs
# ============================================================================


class CreateProjectCommand(BaseModel):
    """Command for creating a project"""

    name: str
    slug: str
    description: Optional[str] = None


class UpdateProjectCommand(BaseModel):
    """Command for updating a project. Unset fields are left unchanged."""

    name: Optional[str] = None
    description: Optional[str] = None


class ListProjectsCommand(BaseModel):
    """Command for listing the projects a user belongs to"""

    limit: int = 20
    offset: int = 0
    sort_by: str = "created_at"
    sort_order: SortOrder = SortOrder.desc
    include_deleted: bool = False


# ============================================================================
# Response DTOs
# ============================================================================


class ProjectResponse(BaseModel):
    """Response for create and update project use cases"""

    id: int
    name: str
    slug: str
    description: Optional[str] = None


class ProjectDetailResponse(BaseModel):
    """Response for get project by id use case"""

    id: int
    name: str
    slug: str
    description: Optional[str] = None
    member_count: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class ProjectSummary(BaseModel):
    """Project entry in list responses"""

    id: int
    name: str
    slug: str
    description: Optional[str] = None
    member_count: int
    task_count: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class ListProjectsResponse(BaseModel):
    """Response for list projects use case"""

    projects: List[ProjectSummary]
    total: int


class ProjectActionResponse(BaseModel):
    """Response for delete, add member and remove member use cases"""

    id: int
    message: str
