from src.app.errors import CONFLICT, validation_error
from src.app.repositories.exceptions import ConflictError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Project
from src.domain.exceptions import ValidationError
from src.libs.result import Error, Result, Return

from .dtos import CreateProjectCommand, ProjectResponse


class CreateProjectUseCase:
    """
    Use case for creating a project.

    Business Rules:
    - Any authenticated user may create a project and becomes its creator
      and first member
    - Slugs are unique; a taken slug fails with CONFLICT
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateProjectCommand, user_id: int
    ) -> Result[ProjectResponse]:
        """
        Execute create project use case.

        Args:
            command: CreateProjectCommand with name, slug and description
            user_id: ID of the authenticated user, recorded as creator

        Returns:
            Result with ProjectResponse, or Error
        """
        async with self.uow:
            try:
                project = await self.uow.projects.save(
                    Project.create(
                        name=command.name,
                        slug=command.slug,
                        created_by_id=user_id,
                        description=command.description,
                    )
                )
            except ValidationError as exc:
                return Return.err(validation_error(exc))
            except ConflictError:
                return Return.err(Error(CONFLICT, "Project slug already in use"))

            await self.uow.commit()

            return Return.ok(
                ProjectResponse(
                    id=project.id,
                    name=project.name,
                    slug=project.slug,
                    description=project.description,
                )
            )
