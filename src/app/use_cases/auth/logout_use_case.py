from src.libs.result import Result, Return


class LogoutUseCase:
    """
    Use case for logout.

    Tokens are stateless, so there is nothing to revoke server-side; the
    client discards its tokens.
    """

    async def execute(self) -> Result[None]:
        return Return.ok(None)
