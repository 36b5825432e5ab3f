from typing import List

from src.app.errors import BAD_REQUEST, not_found
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Project, User
from src.libs.result import Error, Result, Return

from .dtos import AssigneeRef


async def resolve_assignees(
    uow: UnitOfWork, project: Project, refs: List[AssigneeRef]
) -> Result[List[User]]:
    """
    Look up users by username and check each can view ``project``.

    Unknown username -> NOT_FOUND, non-member -> BAD_REQUEST. Duplicate
    references collapse to one user.
    """
    users: List[User] = []
    for ref in refs:
        user = await uow.users.find_by_username(ref.username)
        if user is None:
            return Return.err(not_found("User"))
        if not project.can_user_view(user.id):
            return Return.err(
                Error(BAD_REQUEST, "All assigned users must be members of the project")
            )
        if all(existing.id != user.id for existing in users):
            users.append(user)
    return Return.ok(users)
