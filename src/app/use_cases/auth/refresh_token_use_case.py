"""
Refresh Token Use Case

Exchanges a valid refresh token for a new access token.
"""

from src.app.errors import NOT_FOUND, UNAUTHORIZED
from src.app.services.token_service import InvalidTokenError, TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import RefreshTokenResponse


class RefreshTokenUseCase:
    """
    Use case for access token refresh.

    Business Rules:
    - Invalid or expired refresh token -> UNAUTHORIZED
    - User gone -> NOT_FOUND; user soft-deleted -> UNAUTHORIZED
    - The refresh token itself is not rotated
    """

    def __init__(self, uow: UnitOfWork, token_service: TokenService):
        self.uow = uow
        self.token_service = token_service

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        try:
            payload = self.token_service.verify_refresh_token(refresh_token)
        except InvalidTokenError:
            return Return.err(Error(UNAUTHORIZED, "Invalid or expired refresh token"))

        async with self.uow:
            user = await self.uow.users.find_by_id(payload["userId"], include_deleted=True)

            if user is None:
                return Return.err(Error(NOT_FOUND, "User not found"))

            if user.is_deleted:
                return Return.err(Error(UNAUTHORIZED, "User account is deleted"))

            return Return.ok(
                RefreshTokenResponse(
                    access_token=self.token_service.generate_access_token(
                        user.id, user.email
                    )
                )
            )
