"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Command for registering a new user"""

    email: str
    username: str
    password: str
    first_name: str
    last_name: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User summary returned alongside tokens"""

    id: int
    email: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    access_token: str
    refresh_token: str
    user: UserInfo


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    access_token: str


class CurrentUserResponse(BaseModel):
    """Response for get current user use case"""

    id: int
    email: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    created_at: datetime
