"""
Repository list filters.

``total`` returned next to a page is always the unpaginated match count.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import SortOrder, TaskPriority, TaskStatus


class ListFilter(BaseModel):
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=20, ge=1)
    sort_by: str = "created_at"
    sort_order: SortOrder = SortOrder.desc
    include_deleted: bool = False


class PersonFilter(ListFilter):
    only_deleted: bool = False
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserFilter(ListFilter):
    sort_by: str = "email"
    sort_order: SortOrder = SortOrder.asc
    only_deleted: bool = False
    search: Optional[str] = None
    person_id: Optional[int] = None


class ProjectFilter(ListFilter):
    member_id: Optional[int] = None
    created_by_id: Optional[int] = None


class TaskFilter(ListFilter):
    limit: int = Field(default=10, ge=1)
    only_deleted: bool = False
    project_id: Optional[int] = None
    project_ids: Optional[List[int]] = None
    assigned_user_id: Optional[int] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
