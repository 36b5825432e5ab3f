import pytest

from src.app.errors import CONFLICT, FORBIDDEN, NOT_FOUND, VALIDATION_ERROR
from src.app.use_cases.projects import (
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectByIdUseCase,
    ListProjectsCommand,
    ListProjectsUseCase,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)


@pytest.mark.asyncio
async def test_create_project_makes_creator_a_member(uow, make_user):
    """Creator is recorded and listed as the first member"""
    # Arrange
    alice = await make_user("alice")
    command = CreateProjectCommand(name=" Apollo ", slug="apollo", description="Moon")

    # Act
    result = await CreateProjectUseCase(uow).execute(command, alice.id)

    # Assert
    assert result.is_ok()
    assert result.value.name == "Apollo"
    async with uow:
        project = await uow.projects.find_by_id(result.value.id)
    assert project.created_by_id == alice.id
    assert project.member_ids == [alice.id]


@pytest.mark.asyncio
async def test_create_project_duplicate_slug(uow, make_user, make_project):
    alice = await make_user("alice")
    await make_project(alice.id, slug="apollo")

    result = await CreateProjectUseCase(uow).execute(
        CreateProjectCommand(name="Other", slug="apollo"), alice.id
    )

    assert result.is_err()
    assert result.error.code == CONFLICT


@pytest.mark.asyncio
async def test_create_project_description_too_long(uow, make_user):
    alice = await make_user("alice")

    result = await CreateProjectUseCase(uow).execute(
        CreateProjectCommand(name="Apollo", slug="apollo", description="d" * 5001),
        alice.id,
    )

    assert result.is_err()
    assert result.error.code == VALIDATION_ERROR


@pytest.mark.asyncio
async def test_get_project_permissions(uow, make_user, make_project):
    alice = await make_user("alice")
    bob = await make_user("bob")
    carol = await make_user("carol")
    project = await make_project(alice.id, member_ids=[bob.id])
    use_case = GetProjectByIdUseCase(uow)

    as_member = await use_case.execute(project.id, bob.id)
    as_outsider = await use_case.execute(project.id, carol.id)
    missing = await use_case.execute(999, alice.id)

    assert as_member.is_ok()
    assert as_member.value.member_count == 2
    assert as_outsider.error.code == FORBIDDEN
    assert as_outsider.error.message == "You do not have permission to view this project"
    assert missing.error.code == NOT_FOUND


@pytest.mark.asyncio
async def test_update_project_only_by_creator(uow, make_user, make_project):
    alice = await make_user("alice")
    bob = await make_user("bob")
    project = await make_project(alice.id, member_ids=[bob.id])
    use_case = UpdateProjectUseCase(uow)

    denied = await use_case.execute(project.id, UpdateProjectCommand(name="Gemini"), bob.id)
    updated = await use_case.execute(
        project.id, UpdateProjectCommand(description="New scope"), alice.id
    )

    assert denied.error.code == FORBIDDEN
    assert updated.is_ok()
    assert updated.value.name == "Apollo"
    assert updated.value.description == "New scope"
    assert updated.value.slug == "apollo"


@pytest.mark.asyncio
async def test_update_project_is_all_or_nothing(uow, make_user, make_project):
    alice = await make_user("alice")
    project = await make_project(alice.id)

    result = await UpdateProjectUseCase(uow).execute(
        project.id,
        UpdateProjectCommand(name="Gemini", description="d" * 5001),
        alice.id,
    )

    assert result.is_err()
    async with uow:
        stored = await uow.projects.find_by_id(project.id)
    assert stored.name == "Apollo"


@pytest.mark.asyncio
async def test_delete_project(uow, make_user, make_project):
    alice = await make_user("alice")
    bob = await make_user("bob")
    project = await make_project(alice.id, member_ids=[bob.id])
    use_case = DeleteProjectUseCase(uow)

    denied = await use_case.execute(project.id, bob.id)
    deleted = await use_case.execute(project.id, alice.id)
    again = await use_case.execute(project.id, alice.id)

    assert denied.error.code == FORBIDDEN
    assert deleted.value.message == "Project deleted successfully"
    assert again.error.code == NOT_FOUND


@pytest.mark.asyncio
async def test_list_projects_only_member_projects(uow, make_user, make_project):
    alice = await make_user("alice")
    bob = await make_user("bob")
    await make_project(alice.id, slug="apollo")
    await make_project(alice.id, slug="gemini", member_ids=[bob.id])
    await make_project(bob.id, slug="mercury")
    use_case = ListProjectsUseCase(uow)

    result = await use_case.execute(
        ListProjectsCommand(sort_by="name", sort_order="asc"), bob.id
    )

    assert result.is_ok()
    assert result.value.total == 2
    assert [p.slug for p in result.value.projects] == ["gemini", "mercury"]


@pytest.mark.asyncio
async def test_list_projects_hides_deleted_by_default(uow, make_user, make_project):
    alice = await make_user("alice")
    project = await make_project(alice.id)
    await DeleteProjectUseCase(uow).execute(project.id, alice.id)
    use_case = ListProjectsUseCase(uow)

    default = await use_case.execute(ListProjectsCommand(), alice.id)
    with_deleted = await use_case.execute(ListProjectsCommand(include_deleted=True), alice.id)

    assert default.value.total == 0
    assert with_deleted.value.total == 1
