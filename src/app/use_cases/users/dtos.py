"""
User Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import SortOrder, User


# ============================================================================
# Command DTOs
# ============================================================================


class ListUsersCommand(BaseModel):
    """Command for listing users"""

    limit: int = 20
    offset: int = 0
    sort_by: str = "email"
    sort_order: SortOrder = SortOrder.asc
    search: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserSummary(BaseModel):
    """Public view of a user, used wherever other users are listed"""

    email: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserSummary":
        return cls(
            email=user.email,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
        )


class ListUsersResponse(BaseModel):
    """Response for list users use case"""

    users: List[UserSummary]
    total: int


class UserStatsResponse(BaseModel):
    """Response for user statistics use case"""

    projects_count: int
    pending_tasks_count: int
    in_progress_tasks_count: int
