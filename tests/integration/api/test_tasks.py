import pytest
from httpx import AsyncClient


@pytest.fixture
def project_with_member(client: AsyncClient, register, test_data):
    """alice owns a project with bob as member; carol is registered but outside"""

    async def _setup():
        alice = await register("register_alice")
        bob = await register("register_bob")
        carol = await register("register_carol")
        project = await client.post(
            "/projects", json=test_data.get_copy("create_project"), headers=alice
        )
        project_id = project.json()["id"]
        await client.post(
            f"/projects/{project_id}/members",
            json={"email": "bob@example.com"},
            headers=alice,
        )
        return alice, bob, carol, project_id

    return _setup


async def create_task(client: AsyncClient, headers: dict, project_id: int, **fields) -> dict:
    payload = {"name": "Write launch checklist", "project_id": project_id, **fields}
    response = await client.post("/tasks", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_task(client: AsyncClient, project_with_member, test_data):
    alice, bob, _, project_id = await project_with_member()
    payload = {**test_data.get_copy("create_task"), "project_id": project_id}
    payload["assign_to"] = [{"username": "bob"}]

    response = await client.post("/tasks", json=payload, headers=bob)

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["priority"] == "high"
    assert data["assigned_members"] == [{"username": "bob"}]

    detail = await client.get(f"/tasks/{data['id']}", headers=alice)
    assert detail.json()["project_id"] == project_id

    project = await client.get("/projects", headers=alice)
    assert project.json()["projects"][0]["task_count"] == 1


@pytest.mark.asyncio
async def test_create_task_validation(client: AsyncClient, project_with_member):
    alice, _, carol, project_id = await project_with_member()

    outsider = await client.post(
        "/tasks", json={"name": "Task", "project_id": project_id}, headers=carol
    )
    bad_status = await client.post(
        "/tasks",
        json={"name": "Task", "project_id": project_id, "status": "done"},
        headers=alice,
    )
    non_member = await client.post(
        "/tasks",
        json={"name": "Task", "project_id": project_id, "assign_to": [{"username": "carol"}]},
        headers=alice,
    )

    assert outsider.status_code == 403
    assert bad_status.status_code == 400
    assert non_member.status_code == 400
    assert (
        non_member.json()["error"]["message"]
        == "All assigned users must be members of the project"
    )


@pytest.mark.asyncio
async def test_update_task(client: AsyncClient, project_with_member):
    alice, bob, carol, project_id = await project_with_member()
    task = await create_task(client, alice, project_id)
    url = f"/tasks/{task['id']}"

    updated = await client.patch(
        url,
        json={"status": "in_progress", "priority": "medium", "assign_to": [{"username": "bob"}]},
        headers=bob,
    )
    denied = await client.patch(url, json={"name": "Mine"}, headers=carol)

    assert updated.status_code == 200
    assert updated.json()["status"] == "in_progress"
    assert updated.json()["priority"] == "medium"
    assert updated.json()["assigned_members"] == [{"username": "bob"}]
    assert denied.status_code == 403
    assert denied.json()["error"]["message"] == "You do not have access to this task"


@pytest.mark.asyncio
async def test_archived_task_status_lock(client: AsyncClient, project_with_member):
    alice, _, _, project_id = await project_with_member()
    task = await create_task(client, alice, project_id, status="archived")

    response = await client.patch(
        f"/tasks/{task['id']}", json={"status": "pending"}, headers=alice
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert (
        response.json()["error"]["message"]
        == "Cannot change status of archived task. Unarchive first."
    )


@pytest.mark.asyncio
async def test_list_tasks(client: AsyncClient, project_with_member):
    alice, bob, carol, project_id = await project_with_member()
    await create_task(client, alice, project_id, name="B task", priority="high")
    await create_task(client, alice, project_id, name="A task", assign_to=[{"username": "bob"}])

    everything = await client.get(
        "/tasks", params={"sortBy": "name", "sortOrder": "asc"}, headers=bob
    )
    high = await client.get(
        "/tasks", params={"projectId": project_id, "priority": "high"}, headers=bob
    )
    bob_id = (await client.get("/auth/me", headers=bob)).json()["id"]
    assigned = await client.get("/tasks", params={"assignedUserId": bob_id}, headers=alice)
    outsider = await client.get("/tasks", headers=carol)
    denied = await client.get("/tasks", params={"projectId": project_id}, headers=carol)

    assert [t["name"] for t in everything.json()["tasks"]] == ["A task", "B task"]
    assert everything.json()["total"] == 2
    assert [t["name"] for t in high.json()["tasks"]] == ["B task"]
    assert [t["name"] for t in assigned.json()["tasks"]] == ["A task"]
    assert outsider.json() == {"tasks": [], "total": 0}
    assert denied.status_code == 403


@pytest.mark.asyncio
async def test_delete_task(client: AsyncClient, project_with_member):
    alice, bob, _, project_id = await project_with_member()
    task = await create_task(client, bob, project_id)
    url = f"/tasks/{task['id']}"

    denied = await client.delete(url, headers=bob)
    deleted = await client.delete(url, headers=alice)
    lookup = await client.get(url, headers=alice)

    assert denied.status_code == 403
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Task deleted successfully"
    assert lookup.status_code == 404


@pytest.mark.asyncio
async def test_assignment_survives_membership_removal(client: AsyncClient, project_with_member):
    """Assigning needs membership; losing membership keeps the assignment"""
    alice, _, _, project_id = await project_with_member()
    task = await create_task(client, alice, project_id)
    assign_url = f"/tasks/{task['id']}/assign"
    members_url = f"/projects/{project_id}/members"

    before = await client.post(assign_url, json={"email": "carol@example.com"}, headers=alice)
    assert before.status_code == 400
    assert (
        before.json()["error"]["message"]
        == "User must be a member of the project to be assigned to tasks"
    )

    await client.post(members_url, json={"email": "carol@example.com"}, headers=alice)
    after = await client.post(assign_url, json={"email": "carol@example.com"}, headers=alice)
    assert after.status_code == 200
    assert after.json()["message"] == "User assigned to task successfully"

    removed = await client.delete(
        members_url, params={"email": "carol@example.com"}, headers=alice
    )
    assert removed.status_code == 200

    users = await client.get(f"/tasks/{task['id']}/assigned-users", headers=alice)
    assert users.status_code == 200
    assert [u["email"] for u in users.json()["users"]] == ["carol@example.com"]


@pytest.mark.asyncio
async def test_unassign_user(client: AsyncClient, project_with_member):
    alice, bob, _, project_id = await project_with_member()
    task = await create_task(client, alice, project_id, assign_to=[{"username": "bob"}])
    url = f"/tasks/{task['id']}/unassign/bob@example.com"

    removed = await client.delete(url, headers=bob)
    again = await client.delete(url, headers=bob)

    assert removed.status_code == 200
    assert removed.json()["message"] == "User unassigned from task successfully"
    assert again.status_code == 400
    assert again.json()["error"]["message"] == "User is not assigned to this task"


@pytest.mark.asyncio
async def test_assign_and_unassign_with_mixed_case_domain(client: AsyncClient, project_with_member):
    alice, _, _, project_id = await project_with_member()
    task = await create_task(client, alice, project_id)

    assigned = await client.post(
        f"/tasks/{task['id']}/assign", json={"email": "bob@Example.com"}, headers=alice
    )
    removed = await client.delete(
        f"/tasks/{task['id']}/unassign/bob@Example.com", headers=alice
    )

    assert assigned.status_code == 200
    assert removed.status_code == 200
    assert removed.json()["message"] == "User unassigned from task successfully"

    users = await client.get(f"/tasks/{task['id']}/assigned-users", headers=alice)
    assert users.json()["users"] == []
