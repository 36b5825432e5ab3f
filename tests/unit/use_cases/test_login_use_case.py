import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.errors import UNAUTHORIZED
from src.app.use_cases.auth import LoginUseCase


@pytest.fixture
def registered_user(make_user, password_hasher):
    async def _registered_user():
        return await make_user("alice", password=password_hasher.hash("Password123!"))

    return _registered_user


@pytest.mark.asyncio
async def test_successful_login(uow, password_hasher, token_service, registered_user):
    """Correct credentials return a token pair and the user summary"""
    # Arrange
    user = await registered_user()
    use_case = LoginUseCase(uow, password_hasher, token_service)

    # Act
    result = await use_case.execute("alice@example.com", "Password123!")

    # Assert
    assert result.is_ok()
    data = result.value
    assert data.user.id == user.id
    assert data.user.username == "alice"
    payload = token_service.verify_access_token(data.access_token)
    assert payload["email"] == "alice@example.com"


@pytest.mark.asyncio
async def test_login_wrong_password(uow, password_hasher, token_service, registered_user):
    await registered_user()
    use_case = LoginUseCase(uow, password_hasher, token_service)

    result = await use_case.execute("alice@example.com", "WrongPassword!")

    assert result.is_err()
    assert result.error.code == UNAUTHORIZED
    assert result.error.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_deleted_user(uow, password_hasher, token_service, registered_user):
    user = await registered_user()
    async with uow:
        await uow.users.delete(user.id)
        await uow.commit()
    use_case = LoginUseCase(uow, password_hasher, token_service)

    result = await use_case.execute("alice@example.com", "Password123!")

    assert result.is_err()
    assert result.error.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_unknown_email_still_hashes(mock_uow, token_service):
    """Unknown email fails like a wrong password and still spends a hash"""
    # Arrange
    mock_uow.users = MagicMock()
    mock_uow.users.find_by_email = AsyncMock(return_value=None)
    hasher = MagicMock()

    use_case = LoginUseCase(mock_uow, hasher, token_service)

    # Act
    result = await use_case.execute("nobody@example.com", "Password123!")

    # Assert
    assert result.is_err()
    assert result.error.code == UNAUTHORIZED
    assert result.error.message == "Invalid credentials"
    mock_uow.users.find_by_email.assert_called_once_with(
        "nobody@example.com", include_deleted=True
    )
    hasher.hash.assert_called_once_with("Password123!")
    hasher.compare.assert_not_called()
