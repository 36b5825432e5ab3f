"""
Register Use Case

Creates a Person and its User account, then issues tokens.
"""

import logging

from src.app.errors import BAD_REQUEST, CONFLICT, validation_error
from src.app.repositories.exceptions import ConflictError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Person, User
from src.domain.exceptions import ValidationError
from src.libs.result import Error, Result, Return

from .dtos import AuthResponse, RegisterCommand, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Use case for user registration.

    Business Rules:
    - Email and username must not be used by any account, deleted or not
    - Plaintext password is at least 8 characters; only its bcrypt hash is stored
    - Person is saved first, then the User referencing it
    - A concurrent registration losing the uniqueness race gets CONFLICT
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

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case.

        Args:
            command: RegisterCommand with credentials and names

        Returns:
            Result with AuthResponse containing tokens and the user, or Error
        """
        async with self.uow:
            if await self.uow.users.exists_by_email(command.email):
                return Return.err(Error(BAD_REQUEST, "Email already in use"))

            if await self.uow.users.exists_by_username(command.username):
                return Return.err(Error(BAD_REQUEST, "Username already in use"))

            try:
                User.validate_plain_password(command.password)
                hashed_password = self.password_hasher.hash(command.password)

                person = await self.uow.persons.save(
                    Person.create(command.first_name, command.last_name)
                )
                user = await self.uow.users.save(
                    User.create(
                        email=command.email,
                        username=command.username,
                        password=hashed_password,
                        person_id=person.id,
                    )
                )
            except ValidationError as exc:
                return Return.err(validation_error(exc))
            except ConflictError:
                return Return.err(Error(CONFLICT, "Email or username already in use"))

            await self.uow.commit()

        logger.info(f"User registered: id={user.id}")

        return Return.ok(
            AuthResponse(
                access_token=self.token_service.generate_access_token(user.id, user.email),
                refresh_token=self.token_service.generate_refresh_token(user.id),
                user=UserInfo(
                    id=user.id,
                    email=user.email,
                    username=user.username,
                    first_name=person.first_name,
                    last_name=person.last_name,
                ),
            )
        )
