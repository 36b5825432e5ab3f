from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.app.repositories.filters import UserFilter
from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer

    Returned users carry their Person when it exists.
    """

    @abstractmethod
    async def find_by_id(
        self, user_id: int, include_deleted: bool = False
    ) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def find_by_email(
        self, email: str, include_deleted: bool = False
    ) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def find_by_username(
        self, username: str, include_deleted: bool = False
    ) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[int]) -> List[User]:
        """Get non-deleted users by ID, preserving the order of ``user_ids``"""
        pass

    @abstractmethod
    async def find_all(self, filter: UserFilter) -> Tuple[List[User], int]:
        """List users matching filter, with the unpaginated total"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert (id 0) or update a user, returning the stored entity"""
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Soft delete a user"""
        pass

    @abstractmethod
    async def exists_by_id(self, user_id: int) -> bool:
        """Check a non-deleted user exists"""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether any user other than ``exclude_id`` holds the email"""
        pass

    @abstractmethod
    async def exists_by_username(
        self, username: str, exclude_id: Optional[int] = None
    ) -> bool:
        """Check whether any user other than ``exclude_id`` holds the username"""
        pass
