from src.app.errors import FORBIDDEN, not_found, validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.exceptions import ValidationError
from src.libs.result import Error, Result, Return

from .dtos import ProjectResponse, UpdateProjectCommand


class UpdateProjectUseCase:
    """
    Use case for renaming a project or changing its description.

    Business Rules:
    - Missing or deleted project -> NOT_FOUND
    - Only the creator may edit
    - The slug is fixed after creation
    - Either both fields apply or neither does
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, project_id: int, command: UpdateProjectCommand, user_id: int
    ) -> Result[ProjectResponse]:
        async with self.uow:
            project = await self.uow.projects.find_by_id(project_id)

            if project is None:
                return Return.err(not_found("Project"))

            if not project.can_user_edit(user_id):
                return Return.err(
                    Error(FORBIDDEN, "You do not have permission to edit this project")
                )

            try:
                if command.name is not None:
                    project.update_name(command.name)
                if command.description is not None:
                    project.update_description(command.description)
            except ValidationError as exc:
                return Return.err(validation_error(exc))

            project = await self.uow.projects.save(project)
            await self.uow.commit()

            return Return.ok(
                ProjectResponse(
                    id=project.id,
                    name=project.name,
                    slug=project.slug,
                    description=project.description,
                )
            )
