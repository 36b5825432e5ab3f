from datetime import timedelta
from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.token_service import JwtTokenService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.errors import UNAUTHORIZED
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import InvalidTokenError, TokenService
from src.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# auto_error disabled so missing credentials get the API's own 401 payload
security = HTTPBearer(auto_error=False)


def build_password_hasher(config) -> PasswordHasher:
    return BcryptPasswordHasher(rounds=config.BCRYPT_ROUNDS)


def build_token_service(config) -> TokenService:
    return JwtTokenService(
        access_secret=config.JWT_SECRET,
        refresh_secret=config.JWT_REFRESH_SECRET,
        access_expires=timedelta(minutes=config.JWT_ACCESS_EXPIRES_MINUTES),
        refresh_expires=timedelta(days=config.JWT_REFRESH_EXPIRES_DAYS),
        algorithm=config.JWT_ALGORITHM,
    )


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def _unauthorized(message: str) -> ClientError:
    return ClientError(
        Error(UNAUTHORIZED, message), status_code=status.HTTP_401_UNAUTHORIZED
    )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> dict:
    """
    Dependency to extract and verify the access token from the Authorization header.

    Args:
        request: Incoming request, used to inspect the raw header
        credentials: Bearer token from Authorization header
        token_service: Token verifier configured on the app

    Returns:
        Decoded token payload containing userId and email

    Raises:
        ClientError: 401 if the header is missing, malformed, or the token is
            invalid or expired
    """
    if not request.headers.get("Authorization"):
        raise _unauthorized("No authorization header provided")

    if credentials is None or not credentials.credentials:
        raise _unauthorized("Invalid authorization header format")

    try:
        return token_service.verify_access_token(credentials.credentials)
    except InvalidTokenError:
        raise _unauthorized("Invalid or expired access token")


def get_current_user_id(current_user: dict = Depends(get_current_user)) -> int:
    return current_user["userId"]
