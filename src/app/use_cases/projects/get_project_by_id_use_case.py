from src.app.errors import FORBIDDEN, not_found
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import ProjectDetailResponse


class GetProjectByIdUseCase:
    """
    Use case for reading a single project.

    Business Rules:
    - Missing or deleted project -> NOT_FOUND
    - Only the creator and members may view it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: int, user_id: int) -> Result[ProjectDetailResponse]:
        async with self.uow:
            project = await self.uow.projects.find_by_id(project_id)

            if project is None:
                return Return.err(not_found("Project"))

            if not project.can_user_view(user_id):
                return Return.err(
                    Error(FORBIDDEN, "You do not have permission to view this project")
                )

            return Return.ok(
                ProjectDetailResponse(
                    id=project.id,
                    name=project.name,
                    slug=project.slug,
                    description=project.description,
                    member_count=project.member_count,
                    created_at=project.created_at,
                    updated_at=project.updated_at,
                )
            )
