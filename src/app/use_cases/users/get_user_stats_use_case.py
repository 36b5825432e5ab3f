from src.app.repositories.filters import ProjectFilter, TaskFilter
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TaskStatus
from src.libs.result import Result, Return

from .dtos import UserStatsResponse


class GetUserStatsUseCase:
    """
    Use case for the dashboard counters of the authenticated user.

    Business Rules:
    - projects_count: non-deleted projects the user can view
    - pending / in-progress counts: non-deleted tasks assigned to the user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[UserStatsResponse]:
        async with self.uow:
            _, projects_count = await self.uow.projects.find_all(
                ProjectFilter(member_id=user_id, limit=1)
            )
            _, pending_count = await self.uow.tasks.find_all(
                TaskFilter(assigned_user_id=user_id, status=TaskStatus.pending, limit=1)
            )
            _, in_progress_count = await self.uow.tasks.find_all(
                TaskFilter(
                    assigned_user_id=user_id, status=TaskStatus.in_progress, limit=1
                )
            )

            return Return.ok(
                UserStatsResponse(
                    projects_count=projects_count,
                    pending_tasks_count=pending_count,
                    in_progress_tasks_count=in_progress_count,
                )
            )
