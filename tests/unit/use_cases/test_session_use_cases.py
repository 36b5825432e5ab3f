import pytest

from src.app.errors import NOT_FOUND, UNAUTHORIZED
from src.app.use_cases.auth import (
    GetCurrentUserUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
)


@pytest.mark.asyncio
async def test_refresh_issues_new_access_token(uow, token_service, make_user):
    user = await make_user("alice")
    use_case = RefreshTokenUseCase(uow, token_service)

    result = await use_case.execute(token_service.generate_refresh_token(user.id))

    assert result.is_ok()
    payload = token_service.verify_access_token(result.value.access_token)
    assert payload["userId"] == user.id
    assert payload["email"] == "alice@example.com"


@pytest.mark.asyncio
async def test_refresh_rejects_access_token(uow, token_service, make_user):
    user = await make_user("alice")
    use_case = RefreshTokenUseCase(uow, token_service)

    result = await use_case.execute(
        token_service.generate_access_token(user.id, user.email)
    )

    assert result.is_err()
    assert result.error.code == UNAUTHORIZED
    assert result.error.message == "Invalid or expired refresh token"


@pytest.mark.asyncio
async def test_refresh_unknown_user(uow, token_service):
    use_case = RefreshTokenUseCase(uow, token_service)

    result = await use_case.execute(token_service.generate_refresh_token(999))

    assert result.is_err()
    assert result.error.code == NOT_FOUND


@pytest.mark.asyncio
async def test_refresh_deleted_user(uow, token_service, make_user):
    user = await make_user("alice")
    async with uow:
        await uow.users.delete(user.id)
        await uow.commit()

    result = await RefreshTokenUseCase(uow, token_service).execute(
        token_service.generate_refresh_token(user.id)
    )

    assert result.is_err()
    assert result.error.message == "User account is deleted"


@pytest.mark.asyncio
async def test_current_user_profile(uow, make_user):
    user = await make_user("alice")

    result = await GetCurrentUserUseCase(uow).execute(user.id)

    assert result.is_ok()
    assert result.value.full_name == "Alice Tester"
    assert result.value.created_at is not None


@pytest.mark.asyncio
async def test_current_user_deleted(uow, make_user):
    user = await make_user("alice")
    async with uow:
        await uow.users.delete(user.id)
        await uow.commit()

    result = await GetCurrentUserUseCase(uow).execute(user.id)

    assert result.is_err()
    assert result.error.code == UNAUTHORIZED
    assert result.error.message == "User account is inactive"


@pytest.mark.asyncio
async def test_logout_always_succeeds():
    result = await LogoutUseCase().execute()

    assert result.is_ok()
    assert result.value is None
