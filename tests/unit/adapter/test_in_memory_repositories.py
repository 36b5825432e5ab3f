import pytest

from src.adapter.services.unit_of_work import InMemoryUnitOfWork
from src.app.repositories.exceptions import ConflictError
from src.app.repositories.filters import PersonFilter, TaskFilter
from src.domain.entities import Person, Project, Task, User
from src.domain.exceptions import ValidationError


@pytest.mark.asyncio
async def test_ids_are_assigned_per_table(uow):
    async with uow:
        first = await uow.persons.save(Person.create("Ada", "Lovelace"))
        second = await uow.persons.save(Person.create("Grace", "Hopper"))
        project = await uow.projects.save(Project.create("Apollo", "apollo", first.id))

    assert (first.id, second.id, project.id) == (1, 2, 1)


@pytest.mark.asyncio
async def test_exit_without_commit_rolls_back(db):
    async with InMemoryUnitOfWork(db) as uow:
        await uow.persons.save(Person.create("Ada", "Lovelace"))

    async with InMemoryUnitOfWork(db) as uow:
        assert await uow.persons.find_by_id(1) is None


@pytest.mark.asyncio
async def test_commit_persists(db):
    async with InMemoryUnitOfWork(db) as uow:
        await uow.persons.save(Person.create("Ada", "Lovelace"))
        await uow.commit()

    async with InMemoryUnitOfWork(db) as uow:
        person = await uow.persons.find_by_id(1)
    assert person.full_name == "Ada Lovelace"


@pytest.mark.asyncio
async def test_reads_are_detached_copies(uow):
    async with uow:
        person = await uow.persons.save(Person.create("Ada", "Lovelace"))
        person.update_first_name("Grace")

        stored = await uow.persons.find_by_id(person.id)
    assert stored.first_name == "Ada"


@pytest.mark.asyncio
async def test_unique_email_raises_conflict(uow):
    async with uow:
        await uow.users.save(User.create("ada@example.com", "ada", "hashed-password", 1))

        with pytest.raises(ConflictError):
            await uow.users.save(
                User.create("ada@example.com", "other", "hashed-password", 1)
            )


@pytest.mark.asyncio
async def test_soft_deleted_rows_are_filtered(uow):
    async with uow:
        kept = await uow.persons.save(Person.create("Ada", "Lovelace"))
        gone = await uow.persons.save(Person.create("Grace", "Hopper"))
        await uow.persons.delete(gone.id)

        active, active_total = await uow.persons.find_all(PersonFilter())
        deleted, _ = await uow.persons.find_all(PersonFilter(only_deleted=True))
        found = await uow.persons.find_by_id(gone.id, include_deleted=True)

    assert [p.id for p in active] == [kept.id]
    assert active_total == 1
    assert [p.id for p in deleted] == [gone.id]
    assert found.is_deleted
    assert not await uow.persons.exists_by_id(gone.id)


@pytest.mark.asyncio
async def test_project_member_point_methods_go_through_entity(uow):
    async with uow:
        project = await uow.projects.save(Project.create("Apollo", "apollo", 1))

        updated = await uow.projects.add_member(project.id, 2)
        assert updated.member_ids == [1, 2]
        assert await uow.projects.is_member(project.id, 2)

        with pytest.raises(ValidationError):
            await uow.projects.remove_member(project.id, 1)

        await uow.projects.remove_member(project.id, 2)
        assert not await uow.projects.is_member(project.id, 2)
        assert await uow.projects.add_member(999, 2) is None


@pytest.mark.asyncio
async def test_task_point_methods_and_project_task_ids(uow):
    async with uow:
        project = await uow.projects.save(Project.create("Apollo", "apollo", 1))
        task = await uow.tasks.save(Task.create("Checklist", project.id))

        await uow.tasks.assign_user(task.id, 1)
        assert await uow.tasks.is_assigned_to_user(task.id, 1)

        with pytest.raises(ValidationError):
            await uow.tasks.assign_user(task.id, 1)

        await uow.tasks.unassign_user(task.id, 1)
        assert not await uow.tasks.is_assigned_to_user(task.id, 1)

        assert (await uow.projects.find_by_id(project.id)).task_ids == [task.id]
        await uow.tasks.delete(task.id)
        assert (await uow.projects.find_by_id(project.id)).task_ids == []

        _, total = await uow.tasks.find_all(TaskFilter(project_id=project.id))
        assert total == 0
        assert await uow.tasks.exists_by_name("Checklist", project.id) is False
