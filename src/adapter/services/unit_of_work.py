from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.in_memory import (
    InMemoryDatabase,
    InMemoryPersonRepository,
    InMemoryProjectRepository,
    InMemoryTaskRepository,
    InMemoryUserRepository,
)
from src.adapter.repositories.person_repository import PersonRepository
from src.adapter.repositories.project_repository import ProjectRepository
from src.adapter.repositories.task_repository import TaskRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.persons = PersonRepository(self.session)
        self.users = UserRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.tasks = TaskRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()


class InMemoryUnitOfWork(UnitOfWork):
    """
    UnitOfWork over an InMemoryDatabase.

    Entering takes a snapshot; commit moves the snapshot forward and
    rollback (also run on exit) restores it, so uncommitted writes vanish
    just like with the SQL implementation.
    """

    def __init__(self, db: Optional[InMemoryDatabase] = None):
        self.db = db or InMemoryDatabase()
        self.committed = False
        self._snapshot = self.db.snapshot()

    async def __aenter__(self):
        self.persons = InMemoryPersonRepository(self.db)
        self.users = InMemoryUserRepository(self.db)
        self.projects = InMemoryProjectRepository(self.db)
        self.tasks = InMemoryTaskRepository(self.db)
        self._snapshot = self.db.snapshot()
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self._snapshot = self.db.snapshot()
        self.committed = True

    async def rollback(self):
        self.db.load(self._snapshot)
