import pytest

from src.app.errors import BAD_REQUEST, FORBIDDEN, NOT_FOUND, VALIDATION_ERROR
from src.app.use_cases.tasks import (
    AssignUserToTaskUseCase,
    CreateTaskCommand,
    CreateTaskUseCase,
    GetTaskAssignedUsersUseCase,
    UnassignUserFromTaskUseCase,
)


@pytest.fixture
def task_setup(uow, make_user, make_project):
    async def _task_setup():
        alice = await make_user("alice")
        bob = await make_user("bob")
        carol = await make_user("carol")
        project = await make_project(alice.id, member_ids=[bob.id])
        result = await CreateTaskUseCase(uow).execute(
            CreateTaskCommand(name="Checklist", project_id=project.id), alice.id
        )
        return alice, bob, carol, result.value

    return _task_setup


@pytest.mark.asyncio
async def test_assign_and_list_users(uow, task_setup):
    alice, bob, _, task = await task_setup()

    assigned = await AssignUserToTaskUseCase(uow).execute(
        task.id, "bob@example.com", alice.id
    )
    users = await GetTaskAssignedUsersUseCase(uow).execute(task.id, bob.id)

    assert assigned.value.message == "User assigned to task successfully"
    assert [u.email for u in users.value.users] == ["bob@example.com"]


@pytest.mark.asyncio
async def test_assign_rules(uow, task_setup):
    alice, bob, carol, task = await task_setup()
    use_case = AssignUserToTaskUseCase(uow)
    await use_case.execute(task.id, "bob@example.com", alice.id)

    twice = await use_case.execute(task.id, "bob@example.com", alice.id)
    outsider = await use_case.execute(task.id, "carol@example.com", alice.id)
    unknown = await use_case.execute(task.id, "ghost@example.com", alice.id)
    by_outsider = await use_case.execute(task.id, "alice@example.com", carol.id)
    no_task = await use_case.execute(999, "bob@example.com", alice.id)

    assert twice.error.code == VALIDATION_ERROR
    assert twice.error.message == "User is already assigned to this task"
    assert outsider.error.code == BAD_REQUEST
    assert (
        outsider.error.message
        == "User must be a member of the project to be assigned to tasks"
    )
    assert unknown.error.code == NOT_FOUND
    assert by_outsider.error.code == FORBIDDEN
    assert no_task.error.code == NOT_FOUND


@pytest.mark.asyncio
async def test_unassign(uow, task_setup):
    alice, bob, _, task = await task_setup()
    await AssignUserToTaskUseCase(uow).execute(task.id, "bob@example.com", alice.id)
    use_case = UnassignUserFromTaskUseCase(uow)

    removed = await use_case.execute(task.id, "bob@example.com", bob.id)
    again = await use_case.execute(task.id, "bob@example.com", bob.id)

    assert removed.value.message == "User unassigned from task successfully"
    assert again.error.message == "User is not assigned to this task"
