from src.app.repositories.filters import UserFilter
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import ListUsersCommand, ListUsersResponse, UserSummary


class ListUsersUseCase:
    """
    Use case for browsing the user directory.

    Business Rules:
    - Deleted users are never listed
    - ``search`` matches a substring of the email, case-insensitive
    - ``total`` counts every match, not just the page
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: ListUsersCommand) -> Result[ListUsersResponse]:
        async with self.uow:
            users, total = await self.uow.users.find_all(
                UserFilter(
                    limit=command.limit,
                    offset=command.offset,
                    sort_by=command.sort_by,
                    sort_order=command.sort_order,
                    search=command.search,
                    include_deleted=False,
                )
            )

            return Return.ok(
                ListUsersResponse(
                    users=[UserSummary.from_entity(user) for user in users],
                    total=total,
                )
            )
