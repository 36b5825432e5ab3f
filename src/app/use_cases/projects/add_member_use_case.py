"""
Add Member Use Case

Adds an existing user, looked up by email, to a project.
"""

import logging

from src.app.errors import BAD_REQUEST, FORBIDDEN, not_found, validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.exceptions import ValidationError
from src.libs.result import Error, Result, Return

from .dtos import ProjectActionResponse

logger = logging.getLogger(__name__)


class AddMemberUseCase:
    """
    Use case for adding a member to a project.

    Business Rules:
    - Missing or deleted project -> NOT_FOUND
    - Only the creator may add members
    - Unknown or deleted user -> NOT_FOUND
    - The creator and existing members cannot be added again -> BAD_REQUEST
    - A project holds at most 20 members -> VALIDATION_ERROR
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, project_id: int, email: str, user_id: int
    ) -> Result[ProjectActionResponse]:
        """
        Execute add member use case.

        Args:
            project_id: Project to add the member to
            email: Email of the user to add
            user_id: ID of the authenticated user

        Returns:
            Result with ProjectActionResponse, or Error
        """
        async with self.uow:
            project = await self.uow.projects.find_by_id(project_id)

            if project is None:
                return Return.err(not_found("Project"))

            if not project.can_user_edit(user_id):
                return Return.err(
                    Error(FORBIDDEN, "Only the project creator can add members")
                )

            member = await self.uow.users.find_by_email(email)
            if member is None:
                return Return.err(not_found("User"))

            if project.is_creator(member.id):
                return Return.err(
                    Error(BAD_REQUEST, "Cannot add the project creator as a member")
                )

            if project.has_member(member.id):
                return Return.err(
                    Error(BAD_REQUEST, "User is already a member of this project")
                )

            try:
                project.add_member(member.id)
            except ValidationError as exc:
                return Return.err(validation_error(exc))

            await self.uow.projects.save(project)
            await self.uow.commit()

        logger.info(f"User {member.id} added to project {project_id}")

        return Return.ok(
            ProjectActionResponse(id=project_id, message="Member added successfully")
        )
