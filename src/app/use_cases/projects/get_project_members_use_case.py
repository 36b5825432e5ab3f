from typing import List

from src.app.errors import FORBIDDEN, not_found
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.dtos import UserSummary
from src.libs.result import Error, Result, Return


class GetProjectMembersUseCase:
    """
    Use case for listing the members of a project.

    Business Rules:
    - Missing or deleted project -> NOT_FOUND
    - Only the creator and members may view it
    - Members whose account was deleted are skipped
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: int, user_id: int) -> Result[List[UserSummary]]:
        async with self.uow:
            project = await self.uow.projects.find_by_id(project_id)

            if project is None:
                return Return.err(not_found("Project"))

            if not project.can_user_view(user_id):
                return Return.err(
                    Error(FORBIDDEN, "You do not have access to view this project")
                )

            members = await self.uow.users.find_by_ids(project.member_ids)

            return Return.ok([UserSummary.from_entity(member) for member in members])
