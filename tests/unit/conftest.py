import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.repositories.in_memory import InMemoryDatabase
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.token_service import JwtTokenService
from src.adapter.services.unit_of_work import InMemoryUnitOfWork
from src.domain.entities import Person, Project, User


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def uow(db):
    return InMemoryUnitOfWork(db)


@pytest.fixture
def password_hasher():
    # Lowest bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return JwtTokenService(access_secret="test-access", refresh_secret="test-refresh")


@pytest.fixture
def make_user(uow):
    """Persist a person and user directly through the in-memory repositories."""

    async def _make_user(username: str, password: str = "stored-password"):
        async with uow:
            person = await uow.persons.save(
                Person.create(username.capitalize(), "Tester")
            )
            user = await uow.users.save(
                User.create(
                    email=f"{username}@example.com",
                    username=username,
                    password=password,
                    person_id=person.id,
                )
            )
            await uow.commit()
        return user

    return _make_user


@pytest.fixture
def make_project(uow):
    async def _make_project(creator_id: int, slug: str = "apollo", member_ids=()):
        async with uow:
            project = Project.create(name=slug.title(), slug=slug, created_by_id=creator_id)
            for member_id in member_ids:
                project.add_member(member_id)
            project = await uow.projects.save(project)
            await uow.commit()
        return project

    return _make_project
