# clean_api/test/routes/test_auth_routes.py

# pytest clean_api/test/routes/test_auth_routes.py -v

from typing import Dict, Optional

import pytest
from httpx import AsyncClient

from clean_api.adapters.configuration.config import settings
from clean_api.test.conftest import parse_set_cookies

JANE = {"name": "Jane", "email": "jane@x.com", "password": "Secret123!"}
REFRESH_COOKIE = settings.REFRESH_COOKIE_NAME
CSRF_COOKIE = settings.CSRF_COOKIE_NAME
CSRF_HEADER = settings.CSRF_HEADER_NAME


async def _post(client: AsyncClient, path: str, cookies: Optional[Dict[str, str]] = None,
                headers: Optional[Dict[str, str]] = None, json=None):
    """POST with exactly the given cookies, ignoring whatever the client jar picked up."""
    client.cookies.clear()
    headers = dict(headers or {})
    if cookies:
        headers["Cookie"] = "; ".join(f"{name}={value}" for name, value in cookies.items())
    return await client.post(path, json=json, headers=headers)


async def _sign_up(client: AsyncClient):
    response = await _post(client, "/auth/signup", json=JANE)
    assert response.status_code == 201, response.text
    return response, parse_set_cookies(response)


def _session_cookies(morsels) -> Dict[str, str]:
    return {REFRESH_COOKIE: morsels[REFRESH_COOKIE].value, CSRF_COOKIE: morsels[CSRF_COOKIE].value}


@pytest.mark.asyncio
async def test_sign_up_scenario(async_client: AsyncClient, refresh_token_repository):
    """
    Sign up Jane: 201, no password in the body, both cookies set, exactly one session row.
    """
    response, cookies = await _sign_up(async_client)
    body = response.json()

    assert "password" not in body["user"]
    assert body["user"]["name"] == "Jane"
    assert body["user"]["email"] == "jane@x.com"
    assert body["user"]["status"] == "active"
    assert body["access_token"]
    assert body["csrf_token"] == cookies[CSRF_COOKIE].value
    assert "refresh_token" not in body

    refresh = cookies[REFRESH_COOKIE]
    csrf = cookies[CSRF_COOKIE]
    assert refresh["httponly"] is True
    assert not csrf["httponly"]
    assert refresh["max-age"] == csrf["max-age"] == str(7 * 24 * 60 * 60)
    assert refresh["path"] == csrf["path"] == "/"
    assert refresh["samesite"].lower() == csrf["samesite"].lower() == "lax"

    rows = list(refresh_token_repository.rows.values())
    assert len(rows) == 1
    assert str(rows[0].user_id) == body["user"]["id"]
    assert refresh.value.split(".")[0] == rows[0].jti


@pytest.mark.asyncio
async def test_sign_up_validation_errors(async_client: AsyncClient):
    response = await _post(async_client, "/auth/signup", json={**JANE, "password": "short"})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_sign_up_twice_conflicts(async_client: AsyncClient):
    await _sign_up(async_client)

    response = await _post(async_client, "/auth/signup", json=JANE)

    assert response.status_code == 409
    assert response.json()["error"] == "Email is already registered"


@pytest.mark.asyncio
async def test_sign_in_sets_cookies(async_client: AsyncClient):
    await _sign_up(async_client)

    response = await _post(async_client, "/auth/signin", json={"email": "jane@x.com", "password": "Secret123!"})

    assert response.status_code == 200
    cookies = parse_set_cookies(response)
    assert REFRESH_COOKIE in cookies and CSRF_COOKIE in cookies
    assert "password" not in response.json()["user"]


@pytest.mark.asyncio
async def test_sign_in_wrong_password(async_client: AsyncClient):
    await _sign_up(async_client)

    response = await _post(async_client, "/auth/signin", json={"email": "jane@x.com", "password": "Wrong123!"})

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_refresh_twice_with_same_token(async_client: AsyncClient):
    """
    First refresh rotates the token; replaying the original fails with "revoked".
    """
    _, cookies = await _sign_up(async_client)
    session = _session_cookies(cookies)
    headers = {CSRF_HEADER: session[CSRF_COOKIE]}

    first = await _post(async_client, "/auth/refresh", cookies=session, headers=headers)
    assert first.status_code == 200, first.text
    rotated = parse_set_cookies(first)
    assert rotated[REFRESH_COOKIE].value != session[REFRESH_COOKIE]
    assert rotated[CSRF_COOKIE].value != session[CSRF_COOKIE]

    second = await _post(async_client, "/auth/refresh", cookies=session, headers=headers)
    assert second.status_code == 401
    assert second.json()["error"] == "Refresh token has been revoked"


@pytest.mark.parametrize(
    "header_value",
    [None, "not-the-cookie-value"],
    ids=["missing-header", "mismatched-header"],
)
@pytest.mark.asyncio
async def test_refresh_csrf_failure_blocks_before_any_token_work(async_client: AsyncClient,
                                                                refresh_token_repository, header_value):
    _, cookies = await _sign_up(async_client)
    mutations_before = list(refresh_token_repository.mutations)
    finds_before = refresh_token_repository.find_calls
    headers = {CSRF_HEADER: header_value} if header_value else {}

    response = await _post(async_client, "/auth/refresh", cookies=_session_cookies(cookies), headers=headers)

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid CSRF token"
    assert refresh_token_repository.mutations == mutations_before
    assert refresh_token_repository.find_calls == finds_before


@pytest.mark.asyncio
async def test_refresh_without_csrf_cookie_is_rejected(async_client: AsyncClient):
    _, cookies = await _sign_up(async_client)
    csrf = cookies[CSRF_COOKIE].value

    response = await _post(
        async_client,
        "/auth/refresh",
        cookies={REFRESH_COOKIE: cookies[REFRESH_COOKIE].value},
        headers={CSRF_HEADER: csrf},
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid CSRF token"


@pytest.mark.asyncio
async def test_refresh_without_refresh_cookie(async_client: AsyncClient):
    _, cookies = await _sign_up(async_client)
    csrf = cookies[CSRF_COOKIE].value

    response = await _post(async_client, "/auth/refresh", cookies={CSRF_COOKIE: csrf}, headers={CSRF_HEADER: csrf})

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid refresh token"


@pytest.mark.asyncio
async def test_logout_revokes_and_clears_cookies(async_client: AsyncClient, refresh_token_repository):
    _, cookies = await _sign_up(async_client)
    session = _session_cookies(cookies)

    response = await _post(async_client, "/auth/logout", cookies=session)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    cleared = parse_set_cookies(response)
    assert cleared[REFRESH_COOKIE]["max-age"] == "0"
    assert cleared[CSRF_COOKIE]["max-age"] == "0"
    jti = session[REFRESH_COOKIE].split(".")[0]
    assert refresh_token_repository.rows[jti].revoked_at is not None

    replay = await _post(async_client, "/auth/refresh", cookies=session, headers={CSRF_HEADER: session[CSRF_COOKIE]})
    assert replay.status_code == 401
    assert replay.json()["error"] == "Refresh token has been revoked"


@pytest.mark.asyncio
async def test_logout_without_cookie_is_unauthorized(async_client: AsyncClient):
    response = await _post(async_client, "/auth/logout")

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid refresh token"
