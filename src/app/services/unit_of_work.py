from abc import ABC, abstractmethod

from src.app.repositories.person_repository import IPersonRepository
from src.app.repositories.project_repository import IProjectRepository
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    persons: IPersonRepository
    users: IUserRepository
    projects: IProjectRepository
    tasks: ITaskRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
