from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.app.repositories.filters import ProjectFilter
from src.domain.entities import Project


class IProjectRepository(ABC):
    """Project repository interface - application layer

    Membership changes go through the entity: add_member, remove_member
    load the project, mutate it and save it, so Project invariants always
    apply.
    """

    @abstractmethod
    async def find_by_id(
        self, project_id: int, include_deleted: bool = False
    ) -> Optional[Project]:
        """Get project by ID, with member and task ids"""
        pass

    @abstractmethod
    async def find_all(self, filter: ProjectFilter) -> Tuple[List[Project], int]:
        """List projects matching filter, with the unpaginated total"""
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Insert (id 0) or update a project and its member list"""
        pass

    @abstractmethod
    async def exists_by_id(self, project_id: int) -> bool:
        """Check a non-deleted project exists"""
        pass

    @abstractmethod
    async def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether a non-deleted project other than ``exclude_id`` has the name"""
        pass

    async def add_member(self, project_id: int, user_id: int) -> Optional[Project]:
        """Add a member through Project.add_member; None if the project is missing"""
        project = await self.find_by_id(project_id)
        if project is None:
            return None
        project.add_member(user_id)
        return await self.save(project)

    async def remove_member(self, project_id: int, user_id: int) -> Optional[Project]:
        """Remove a member through Project.remove_member; None if the project is missing"""
        project = await self.find_by_id(project_id)
        if project is None:
            return None
        project.remove_member(user_id)
        return await self.save(project)

    async def is_member(self, project_id: int, user_id: int) -> bool:
        project = await self.find_by_id(project_id)
        return project is not None and project.has_member(user_id)
