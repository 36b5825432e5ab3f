from src.app.errors import FORBIDDEN, not_found
from src.app.repositories.filters import ProjectFilter, TaskFilter
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import ListTasksCommand, ListTasksResponse, TaskSummary


class ListTasksUseCase:
    """
    Use case for listing tasks.

    Business Rules:
    - With project_id: the project must exist and be visible to the user
    - Without project_id: only tasks of projects the user can view
    - Deleted tasks are never listed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: ListTasksCommand, user_id: int) -> Result[ListTasksResponse]:
        async with self.uow:
            task_filter = TaskFilter(
                project_id=command.project_id,
                status=command.status,
                priority=command.priority,
                assigned_user_id=command.assigned_user_id,
                limit=command.limit,
                offset=command.offset,
                sort_by=command.sort_by,
                sort_order=command.sort_order,
            )

            if command.project_id is not None:
                project = await self.uow.projects.find_by_id(command.project_id)
                if project is None:
                    return Return.err(not_found("Project"))
                if not project.can_user_view(user_id):
                    return Return.err(
                        Error(FORBIDDEN, "You do not have access to this project")
                    )
            else:
                _, visible_count = await self.uow.projects.find_all(
                    ProjectFilter(member_id=user_id, limit=1)
                )
                projects, _ = await self.uow.projects.find_all(
                    ProjectFilter(member_id=user_id, limit=max(visible_count, 1))
                )
                task_filter.project_ids = [project.id for project in projects]

            tasks, total = await self.uow.tasks.find_all(task_filter)

            return Return.ok(
                ListTasksResponse(
                    tasks=[
                        TaskSummary(
                            id=task.id,
                            name=task.name,
                            description=task.description,
                            status=task.status,
                            priority=task.priority,
                            assigned_user_count=task.assigned_user_count,
                            created_at=task.created_at,
                            updated_at=task.updated_at,
                        )
                        for task in tasks
                    ],
                    total=total,
                )
            )
