# clean_api/test/routes/test_user_routes.py

# pytest clean_api/test/routes/test_user_routes.py -v

from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient

from clean_api.adapters.configuration.config import settings
from clean_api.test.conftest import parse_set_cookies

JANE = {"name": "Jane", "email": "jane@x.com", "password": "Secret123!"}


async def _access_token(client: AsyncClient) -> str:
    response = await client.post("/auth/signup", json=JANE)
    assert response.status_code == 201, response.text
    return response.json()["access_token"]


@pytest.mark.asyncio
async def test_me_with_valid_bearer_token(async_client: AsyncClient):
    token = await _access_token(async_client)

    response = await async_client.get("/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "jane@x.com"
    assert "password" not in body


@pytest.mark.asyncio
async def test_me_without_token(async_client: AsyncClient):
    response = await async_client.get("/users/me")

    assert response.status_code == 401
    assert response.json()["error"] == "Missing access token"
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_me_with_tampered_token(async_client: AsyncClient):
    token = await _access_token(async_client)

    response = await async_client.get("/users/me", headers={"Authorization": f"Bearer {token}x"})

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid access token"


@pytest.mark.asyncio
async def test_me_rejects_refresh_token_as_bearer(async_client: AsyncClient):
    """
    The bearer guard only accepts access tokens and never reads refresh token state.
    """
    signup = await async_client.post("/auth/signup", json=JANE)
    refresh_token = parse_set_cookies(signup)[settings.REFRESH_COOKIE_NAME].value

    response = await async_client.get("/users/me", headers={"Authorization": f"Bearer {refresh_token}"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_for_deleted_user(async_client: AsyncClient, user_repository):
    token = await _access_token(async_client)
    user_repository.rows.clear()

    response = await async_client.get("/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 404


JOHN = {"name": "John", "email": "john@x.com", "password": "Secret456!"}


async def _sign_up_as(client: AsyncClient, person) -> tuple:
    """Sign up and return (auth headers, user id)."""
    response = await client.post("/auth/signup", json=person)
    assert response.status_code == 201, response.text
    headers = {"Authorization": f"Bearer {response.json()['access_token']}"}
    me = await client.get("/users/me", headers=headers)
    return headers, me.json()["id"]


@pytest.mark.asyncio
async def test_list_users_is_paginated_and_searchable(async_client: AsyncClient):
    headers, _ = await _sign_up_as(async_client, JANE)
    await _sign_up_as(async_client, JOHN)

    everyone = await async_client.get("/users", headers=headers, params={"size": 1})
    johns = await async_client.get("/users", headers=headers, params={"search": "JOHN"})

    assert everyone.status_code == 200
    page = everyone.json()
    assert page["total"] == 2
    assert page["page"] == 1 and page["size"] == 1 and page["pages"] == 2
    assert len(page["items"]) == 1
    assert "password" not in page["items"][0]
    assert [user["email"] for user in johns.json()["items"]] == ["john@x.com"]


@pytest.mark.asyncio
async def test_list_users_requires_bearer_token(async_client: AsyncClient):
    response = await async_client.get("/users")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_get_user_by_id(async_client: AsyncClient):
    headers, _ = await _sign_up_as(async_client, JANE)
    _, john_id = await _sign_up_as(async_client, JOHN)

    found = await async_client.get(f"/users/{john_id}", headers=headers)
    missing = await async_client.get(f"/users/{uuid4()}", headers=headers)

    assert found.status_code == 200
    assert found.json()["email"] == "john@x.com"
    assert "password" not in found.json()
    assert missing.status_code == 404
    assert missing.json()["error"] == "User not found."


@pytest.mark.asyncio
async def test_update_own_account_changes_name_and_password(async_client: AsyncClient):
    headers, jane_id = await _sign_up_as(async_client, JANE)

    response = await async_client.put(
        f"/users/{jane_id}", headers=headers, json={"name": "Jane Doe", "password": "NewSecret123!"}
    )

    assert response.status_code == 200, response.text
    assert response.json()["name"] == "Jane Doe"
    assert response.json()["email"] == "jane@x.com"
    old = await async_client.post("/auth/signin", json={"email": "jane@x.com", "password": "Secret123!"})
    new = await async_client.post("/auth/signin", json={"email": "jane@x.com", "password": "NewSecret123!"})
    assert old.status_code == 401
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_update_other_account_is_forbidden(async_client: AsyncClient, user_repository):
    headers, _ = await _sign_up_as(async_client, JANE)
    _, john_id = await _sign_up_as(async_client, JOHN)

    response = await async_client.put(f"/users/{john_id}", headers=headers, json={"name": "Hacked"})

    assert response.status_code == 403
    assert response.json()["code"] == "PERMISSION_DENIED"
    assert user_repository.rows[UUID(john_id)].name == "John"


@pytest.mark.asyncio
async def test_update_to_taken_email_conflicts(async_client: AsyncClient):
    headers, jane_id = await _sign_up_as(async_client, JANE)
    await _sign_up_as(async_client, JOHN)

    response = await async_client.put(f"/users/{jane_id}", headers=headers, json={"email": "JOHN@x.com"})

    assert response.status_code == 409
    assert response.json()["error"] == "Email is already registered"


@pytest.mark.asyncio
async def test_update_rejects_unknown_fields(async_client: AsyncClient):
    headers, jane_id = await _sign_up_as(async_client, JANE)

    response = await async_client.put(f"/users/{jane_id}", headers=headers, json={"role": "admin"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_own_account(async_client: AsyncClient, user_repository):
    headers, jane_id = await _sign_up_as(async_client, JANE)

    response = await async_client.delete(f"/users/{jane_id}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert UUID(jane_id) not in user_repository.rows
    # the access token is still valid but its subject is gone
    me = await async_client.get("/users/me", headers=headers)
    assert me.status_code == 404


@pytest.mark.asyncio
async def test_delete_other_account_is_forbidden(async_client: AsyncClient, user_repository):
    headers, _ = await _sign_up_as(async_client, JANE)
    _, john_id = await _sign_up_as(async_client, JOHN)

    response = await async_client.delete(f"/users/{john_id}", headers=headers)

    assert response.status_code == 403
    assert UUID(john_id) in user_repository.rows
