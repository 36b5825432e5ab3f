"""
Remove Member Use Case

Removes a user, looked up by email, from a project.
"""

import logging

from src.app.errors import BAD_REQUEST, FORBIDDEN, not_found, validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.exceptions import ValidationError
from src.libs.result import Error, Result, Return

from .dtos import ProjectActionResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing a member from a project.

    Business Rules:
    - Missing or deleted project -> NOT_FOUND
    - Only the creator may remove members
    - Unknown or deleted user -> NOT_FOUND
    - Non-members -> BAD_REQUEST
    - The creator cannot be removed -> VALIDATION_ERROR
    - Task assignments of the removed user are kept
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, project_id: int, email: str, user_id: int
    ) -> Result[ProjectActionResponse]:
        async with self.uow:
            project = await self.uow.projects.find_by_id(project_id)

            if project is None:
                return Return.err(not_found("Project"))

            if not project.can_user_edit(user_id):
                return Return.err(
                    Error(FORBIDDEN, "Only the project creator can remove members")
                )

            member = await self.uow.users.find_by_email(email)
            if member is None:
                return Return.err(not_found("User"))

            if not project.has_member(member.id):
                return Return.err(
                    Error(BAD_REQUEST, "User is not a member of this project")
                )

            try:
                project.remove_member(member.id)
            except ValidationError as exc:
                return Return.err(validation_error(exc))

            await self.uow.projects.save(project)
            await self.uow.commit()

        logger.info(f"User {member.id} removed from project {project_id}")

        return Return.ok(
            ProjectActionResponse(id=project_id, message="Member removed successfully")
        )
