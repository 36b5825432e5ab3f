from src.app.repositories.filters import ProjectFilter
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import ListProjectsCommand, ListProjectsResponse, ProjectSummary


class ListProjectsUseCase:
    """
    Use case for listing the projects the user is a member of.

    Business Rules:
    - Only projects where the user is a member (creators always are)
    - Deleted projects only with include_deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: ListProjectsCommand, user_id: int
    ) -> Result[ListProjectsResponse]:
        async with self.uow:
            projects, total = await self.uow.projects.find_all(
                ProjectFilter(
                    limit=command.limit,
                    offset=command.offset,
                    sort_by=command.sort_by,
                    sort_order=command.sort_order,
                    include_deleted=command.include_deleted,
                    member_id=user_id,
                )
            )

            return Return.ok(
                ListProjectsResponse(
                    projects=[
                        ProjectSummary(
                            id=project.id,
                            name=project.name,
                            slug=project.slug,
                            description=project.description,
                            member_count=project.member_count,
                            task_count=project.task_count,
                            created_at=project.created_at,
                            updated_at=project.updated_at,
                        )
                        for project in projects
                    ],
                    total=total,
                )
            )
