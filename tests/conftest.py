"""Pytest configuration and fixtures for pixico.

Uses app.main:app for HTTP tests with the search service overridden by
in-memory repositories, and app.infrastructure.persistence.database for
DB-dependent fixtures. Env is set before app.main is imported so Settings
validation passes without a .env file.
"""

import os
import tempfile

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("STORAGE_ROOT", tempfile.mkdtemp(prefix="pixico-test-"))

import httpx  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.api.v1.dependencies import get_search_service  # noqa: E402
from app.api.websocket import ConnectionManager  # noqa: E402
from app.application.use_cases.search import SearchService  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.infrastructure.persistence import database  # noqa: E402
from tests.fakes import (  # noqa: E402
    FakeArticleSearchRepository,
    FakePromptSearchRepository,
    summary,
)

get_settings.cache_clear()

from app.main import app  # noqa: E402


@pytest.fixture
def prompt_search_repo() -> FakePromptSearchRepository:
    return FakePromptSearchRepository(
        [
            (summary("p1", "Neon City Samurai", "neon-city-samurai", view_count=5), "4521", "rainy neon street"),
            (summary("p2", "Golden Hour Portrait", "golden-hour-portrait", view_count=50), "0007", "sunflower field"),
            (summary("p3", "Neon Draft", "neon-draft", status="draft"), "1111", "neon"),
            (summary("p4", "Misty Lake", "misty-lake", view_count=9), "2040", "neon reflections at dawn"),
        ]
    )


@pytest.fixture
def article_search_repo() -> FakeArticleSearchRepository:
    return FakeArticleSearchRepository(
        [
            (summary("b1", "Lighting Neon Scenes", "lighting-neon-scenes"), "<p>Use neon.</p>"),
            (summary("b2", "Aspect Ratios Explained", "aspect-ratios-explained"), "<p>16:9</p>"),
        ]
    )


@pytest.fixture
def search_service(
    prompt_search_repo: FakePromptSearchRepository,
    article_search_repo: FakeArticleSearchRepository,
) -> SearchService:
    return SearchService(prompt_search_repo, article_search_repo)


@pytest.fixture
async def client(search_service: SearchService) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), search backed by fakes.

    ASGITransport does not run the lifespan, so the state it would set up is
    assigned here.
    """
    app.dependency_overrides[get_search_service] = lambda: search_service
    app.state.ws_manager = ConnectionManager()
    app.state.http_client = httpx.AsyncClient()
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        await app.state.http_client.aclose()
        app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL (Postgres). Skips when it is not configured. Mark
    such tests with @pytest.mark.requires_db; run without DB via:
    pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: uv run alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
