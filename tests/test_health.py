"""Smoke tests for health and app wiring."""

import pytest
from httpx import AsyncClient

from app.core.config import get_settings


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_root_returns_html_with_search_widget(client: AsyncClient) -> None:
    """GET / returns HTML landing page wired to the search socket."""
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers.get("content-type", "")
    assert "/api/v1/search/ws" in response.text


async def test_responses_carry_request_id_and_security_headers(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


async def test_readiness_without_database_is_503(client: AsyncClient) -> None:
    if get_settings().database_url:
        pytest.skip("DATABASE_URL is configured")
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
