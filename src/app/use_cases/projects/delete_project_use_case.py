import logging

from src.app.errors import FORBIDDEN, not_found
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import ProjectActionResponse

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """
    Use case for soft-deleting a project.

    Business Rules:
    - Missing or already deleted project -> NOT_FOUND
    - Only the creator may delete
    - Tasks are left in place; they become unreachable with the project
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: int, user_id: int) -> Result[ProjectActionResponse]:
        async with self.uow:
            project = await self.uow.projects.find_by_id(project_id)

            if project is None:
                return Return.err(not_found("Project"))

            if not project.can_user_delete(user_id):
                return Return.err(
                    Error(FORBIDDEN, "You do not have permission to delete this project")
                )

            project.delete()
            await self.uow.projects.save(project)
            await self.uow.commit()

        logger.info(f"Project {project_id} deleted by user {user_id}")

        return Return.ok(
            ProjectActionResponse(id=project_id, message="Project deleted successfully")
        )
