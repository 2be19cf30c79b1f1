"""Auth and role checks on protected endpoints (no database needed)."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import get_chat_client, get_current_user_optional
from app.application.dtos.user import UserResult
from app.main import app


def _user(role: str) -> UserResult:
    return UserResult(
        id="u1",
        email="ada@example.com",
        full_name="Ada",
        avatar_url=None,
        role=role,
        is_active=True,
    )


@pytest.fixture
def as_role(client: AsyncClient):
    def _set(role: str) -> None:
        app.dependency_overrides[get_current_user_optional] = lambda: _user(role)

    return _set


async def test_me_without_token_is_401(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_garbage_token_is_401(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_me_returns_current_user(client: AsyncClient, as_role) -> None:
    as_role("user")
    response = await client.get("/api/v1/auth/me")
    assert response.status_code == 200
    assert response.json()["email"] == "ada@example.com"


async def test_admin_routes_require_admin_role(client: AsyncClient, as_role) -> None:
    assert (await client.get("/api/v1/admin/stats")).status_code == 401
    as_role("user")
    assert (await client.get("/api/v1/admin/stats")).status_code == 403
    assert (await client.get("/api/v1/admin/prompts")).status_code == 403
    assert (await client.get("/api/v1/search/ws/status")).status_code == 403


async def test_admin_sees_search_connection_count(client: AsyncClient, as_role) -> None:
    as_role("admin")
    response = await client.get("/api/v1/search/ws/status")
    assert response.status_code == 200
    assert response.json() == {"total_connections": 0}


async def test_support_bot_answers_without_account(client: AsyncClient) -> None:
    fake = AsyncMock()
    fake.complete = AsyncMock(return_value="Open a prompt and press **Copy**.")
    app.dependency_overrides[get_chat_client] = lambda: fake
    response = await client.post("/api/v1/support", json={"message": "How do I copy?"})
    assert response.status_code == 200
    assert response.json() == {"response": "Open a prompt and press Copy."}


async def test_support_rejects_empty_message(client: AsyncClient) -> None:
    response = await client.post("/api/v1/support", json={"message": ""})
    assert response.status_code == 422
