"""
Login Use Case

Verifies credentials and issues an access/refresh token pair.
"""

from src.app.errors import UNAUTHORIZED
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import AuthResponse, UserInfo


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Unknown email, deleted account and wrong password all fail with the
      same UNAUTHORIZED "Invalid credentials"
    - A bcrypt round runs even when the user does not exist
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse containing tokens and the user, or Error
        """
        async with self.uow:
            user = await self.uow.users.find_by_email(email, include_deleted=True)

            if user is None:
                # Same bcrypt cost as a real comparison
                self.password_hasher.hash(password)
                return Return.err(Error(UNAUTHORIZED, "Invalid credentials"))

            password_valid = self.password_hasher.compare(password, user.password)

            if not password_valid or user.is_deleted:
                return Return.err(Error(UNAUTHORIZED, "Invalid credentials"))

            return Return.ok(
                AuthResponse(
                    access_token=self.token_service.generate_access_token(
                        user.id, user.email
                    ),
                    refresh_token=self.token_service.generate_refresh_token(user.id),
                    user=UserInfo(
                        id=user.id,
                        email=user.email,
                        username=user.username,
                        first_name=user.first_name,
                        last_name=user.last_name,
                    ),
                )
            )
