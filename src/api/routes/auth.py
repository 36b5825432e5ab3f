from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    CurrentUserResponse,
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
)
from src.app.use_cases.users import GetUserStatsUseCase, UserStatsResponse
from src.depends import (
    get_current_user_id,
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    username: str = Field(..., min_length=3, max_length=50, description="Unique username")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    first_name: str = Field(..., min_length=1, max_length=100, description="First name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Last name")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Register a new account.

    Creates the person and user records and returns an access/refresh token
    pair.

    Raises:
        - 400 Bad Request: Email or username already in use, invalid input
        - 409 Conflict: Concurrent registration took the email or username
    """
    command = RegisterCommand(
        email=request.email,
        username=request.username,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
    )

    use_case = RegisterUseCase(uow, password_hasher, token_service)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Authenticate with email and password.

    Raises:
        - 401 Unauthorized: Invalid credentials
    """
    use_case = LoginUseCase(uow, password_hasher, token_service)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RefreshRequest(BaseModel):
    """Refresh token HTTP request payload"""

    refresh_token: str = Field(..., min_length=1, description="Refresh token")


@router.post(
    "/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse
)
async def refresh(
    request: RefreshRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Issue a new access token from a refresh token.

    Raises:
        - 401 Unauthorized: Invalid or expired token, deleted account
        - 404 Not Found: User no longer exists
    """
    use_case = RefreshTokenUseCase(uow, token_service)
    result = await use_case.execute(request.refresh_token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout():
    """Log out. Tokens are stateless; the client drops them."""
    result = await LogoutUseCase().execute()

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=CurrentUserResponse)
async def me(
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Profile of the authenticated user.

    Raises:
        - 401 Unauthorized: Missing/invalid token, user missing or deleted
    """
    result = await GetCurrentUserUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=UserStatsResponse)
async def stats(
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Project and task counters of the authenticated user."""
    result = await GetUserStatsUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
