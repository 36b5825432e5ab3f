"""
User Use Cases

User directory and per-user statistics.
"""

from .list_users_use_case import ListUsersUseCase
from .get_user_stats_use_case import GetUserStatsUseCase
from .dtos import ListUsersCommand, ListUsersResponse, UserStatsResponse, UserSummary

__all__ = [
    # Use Cases
    "ListUsersUseCase",
    "GetUserStatsUseCase",
    # DTOs - Commands
    "ListUsersCommand",
    # DTOs - Responses
    "ListUsersResponse",
    "UserStatsResponse",
    # DTOs - Nested Models
    "UserSummary",
]
