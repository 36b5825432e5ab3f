from src.app.errors import UNAUTHORIZED
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import CurrentUserResponse


class GetCurrentUserUseCase:
    """
    Use case for reading the authenticated user's profile.

    Business Rules:
    - Missing user -> UNAUTHORIZED "User not found"
    - Soft-deleted user -> UNAUTHORIZED "User account is inactive"
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[CurrentUserResponse]:
        async with self.uow:
            user = await self.uow.users.find_by_id(user_id, include_deleted=True)

            if user is None:
                return Return.err(Error(UNAUTHORIZED, "User not found"))

            if user.is_deleted:
                return Return.err(Error(UNAUTHORIZED, "User account is inactive"))

            return Return.ok(
                CurrentUserResponse(
                    id=user.id,
                    email=user.email,
                    username=user.username,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    full_name=user.full_name,
                    created_at=user.created_at,
                )
            )
