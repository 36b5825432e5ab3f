import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_users(client: AsyncClient, register):
    headers = await register("register_carol")
    await register("register_alice")
    await register("register_bob")

    response = await client.get("/users", headers=headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert [u["email"] for u in data["users"]] == [
        "alice@example.com",
        "bob@example.com",
        "carol@example.com",
    ]


@pytest.mark.asyncio
async def test_list_users_search_and_paging(client: AsyncClient, register):
    headers = await register("register_alice")
    await register("register_bob")

    searched = await client.get("/users", params={"search": "BOB"}, headers=headers)
    paged = await client.get(
        "/users",
        params={"limit": 1, "offset": 1, "sortBy": "username", "sortOrder": "desc"},
        headers=headers,
    )

    assert [u["username"] for u in searched.json()["users"]] == ["bob"]
    assert paged.json()["total"] == 2
    assert [u["username"] for u in paged.json()["users"]] == ["alice"]


@pytest.mark.asyncio
async def test_list_users_requires_auth(client: AsyncClient):
    response = await client.get("/users")

    assert response.status_code == 401
