"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutUseCase
from .get_current_user_use_case import GetCurrentUserUseCase
from .dtos import (
    AuthResponse,
    CurrentUserResponse,
    RefreshTokenResponse,
    RegisterCommand,
    UserInfo,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "GetCurrentUserUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "RefreshTokenResponse",
    "CurrentUserResponse",
    # DTOs - Nested Models
    "UserInfo",
]
