from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.app.repositories.filters import PersonFilter
from src.domain.entities import Person


class IPersonRepository(ABC):
    """Person repository interface - application layer"""

    @abstractmethod
    async def find_by_id(
        self, person_id: int, include_deleted: bool = False
    ) -> Optional[Person]:
        """Get person by ID"""
        pass

    @abstractmethod
    async def find_all(self, filter: PersonFilter) -> Tuple[List[Person], int]:
        """List persons matching filter, with the unpaginated total"""
        pass

    @abstractmethod
    async def save(self, person: Person) -> Person:
        """Insert (id 0) or update a person, returning the stored entity"""
        pass

    @abstractmethod
    async def delete(self, person_id: int) -> None:
        """Soft delete a person"""
        pass

    @abstractmethod
    async def exists_by_id(self, person_id: int) -> bool:
        """Check a non-deleted person exists"""
        pass
