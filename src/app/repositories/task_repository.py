from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.app.repositories.filters import TaskFilter
from src.domain.entities import Task


class ITaskRepository(ABC):
    """Task repository interface - application layer

    Assignment changes go through Task.assign_user / Task.unassign_user
    followed by save.
    """

    @abstractmethod
    async def find_by_id(
        self, task_id: int, include_deleted: bool = False
    ) -> Optional[Task]:
        """Get task by ID, with assigned user ids"""
        pass

    @abstractmethod
    async def find_all(self, filter: TaskFilter) -> Tuple[List[Task], int]:
        """List tasks matching filter, with the unpaginated total"""
        pass

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Insert (id 0) or update a task and its assignments"""
        pass

    @abstractmethod
    async def delete(self, task_id: int) -> None:
        """Soft delete a task"""
        pass

    @abstractmethod
    async def exists_by_id(self, task_id: int) -> bool:
        """Check a non-deleted task exists"""
        pass

    @abstractmethod
    async def exists_by_name(
        self, name: str, project_id: int, exclude_id: Optional[int] = None
    ) -> bool:
        """Check whether the project has another non-deleted task with the name"""
        pass

    async def assign_user(self, task_id: int, user_id: int) -> Optional[Task]:
        task = await self.find_by_id(task_id)
        if task is None:
            return None
        task.assign_user(user_id)
        return await self.save(task)

    async def unassign_user(self, task_id: int, user_id: int) -> Optional[Task]:
        task = await self.find_by_id(task_id)
        if task is None:
            return None
        task.unassign_user(user_id)
        return await self.save(task)

    async def is_assigned_to_user(self, task_id: int, user_id: int) -> bool:
        task = await self.find_by_id(task_id)
        return task is not None and task.is_assigned_to_user(user_id)
