"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories and application
services. All services are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.

Repositories use SQLAlchemy and PostgreSQL only. Read repositories get a
plain session (get_db); write paths get a transactional one
(get_db_transactional) that commits when the request succeeds.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.user import UserResult
from app.application.services.blog_service import BlogService
from app.application.services.category_service import CategoryService
from app.application.services.chat_service import ChatService
from app.application.services.contact_service import ContactService
from app.application.services.prompt_service import PromptService
from app.application.services.settings_service import SiteSettingsService
from app.application.services.user_service import UserService
from app.application.use_cases.admin_stats import GetDashboardStatsUseCase
from app.application.use_cases.search import SearchService
from app.application.use_cases.uploads import ImageUploadService
from app.core.config import get_settings
from app.domain.enums import UserRole
from app.domain.exceptions import AuthorizationException
from app.infrastructure.external.llm import OpenRouterClient
from app.infrastructure.external.storage import StorageFactory
from app.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
    get_session_factory,
)
from app.infrastructure.persistence.repositories import (
    AiModelRepository,
    ArticleSearchRepository,
    BlogRepository,
    CategoryRepository,
    ChatRepository,
    ContactRepository,
    PromptRepository,
    PromptSearchRepository,
    SettingRepository,
    UserRepository,
)
from app.infrastructure.security.jwt import verify_token

ReadSession = Annotated[AsyncSession, Depends(get_db)]
WriteSession = Annotated[AsyncSession, Depends(get_db_transactional)]


# ---- Search ----


def get_search_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory for search reads (each concurrent read opens its own session)."""
    return get_session_factory()


def get_search_service(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_search_session_factory)
    ],
) -> SearchService:
    """Search over published prompts and articles. Override in tests."""
    return SearchService(
        PromptSearchRepository(session_factory),
        ArticleSearchRepository(session_factory),
    )


# ---- Repositories ----


async def get_prompt_repo(db: ReadSession) -> PromptRepository:
    return PromptRepository(db)


async def get_prompt_repo_for_write(db: WriteSession) -> PromptRepository:
    return PromptRepository(db)


async def get_blog_repo(db: ReadSession) -> BlogRepository:
    return BlogRepository(db)


async def get_blog_repo_for_write(db: WriteSession) -> BlogRepository:
    return BlogRepository(db)


async def get_category_repo(db: ReadSession) -> CategoryRepository:
    return CategoryRepository(db)


async def get_category_repo_for_write(db: WriteSession) -> CategoryRepository:
    return CategoryRepository(db)


async def get_ai_model_repo(db: ReadSession) -> AiModelRepository:
    return AiModelRepository(db)


async def get_ai_model_repo_for_write(db: WriteSession) -> AiModelRepository:
    return AiModelRepository(db)


async def get_contact_repo_for_write(db: WriteSession) -> ContactRepository:
    return ContactRepository(db)


async def get_user_repo_for_write(db: WriteSession) -> UserRepository:
    return UserRepository(db)


# ---- Services ----


def get_prompt_service(
    repo: Annotated[PromptRepository, Depends(get_prompt_repo_for_write)],
) -> PromptService:
    return PromptService(repo)


def get_blog_service(
    repo: Annotated[BlogRepository, Depends(get_blog_repo_for_write)],
) -> BlogService:
    return BlogService(repo)


def get_category_service(
    repo: Annotated[CategoryRepository, Depends(get_category_repo_for_write)],
) -> CategoryService:
    return CategoryService(repo)


def get_contact_service(
    repo: Annotated[ContactRepository, Depends(get_contact_repo_for_write)],
) -> ContactService:
    return ContactService(repo)


def get_user_service(
    repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
) -> UserService:
    return UserService(repo)


async def get_settings_service(db: WriteSession) -> SiteSettingsService:
    return SiteSettingsService(SettingRepository(db))


async def get_dashboard_stats_use_case(db: ReadSession) -> GetDashboardStatsUseCase:
    """Dashboard counts (all repositories share one read session)."""
    return GetDashboardStatsUseCase(
        PromptRepository(db),
        BlogRepository(db),
        CategoryRepository(db),
        UserRepository(db),
        ContactRepository(db),
    )


def get_chat_client(request: Request) -> OpenRouterClient:
    """OpenRouter client over the shared HTTP client (lifespan)."""
    settings = get_settings()
    api_key = settings.openrouter_api_key
    return OpenRouterClient(
        request.app.state.http_client,
        api_key=api_key.get_secret_value() if api_key else None,
        model=settings.openrouter_model,
        base_url=settings.openrouter_base_url,
        referer=settings.openrouter_referer,
        timeout=settings.openrouter_timeout_seconds,
    )


async def get_chat_service(
    db: WriteSession,
    client: Annotated[OpenRouterClient, Depends(get_chat_client)],
) -> ChatService:
    return ChatService(
        client, ChatRepository(db), history_limit=get_settings().chat_history_limit
    )


def get_support_chat_service(
    client: Annotated[OpenRouterClient, Depends(get_chat_client)],
) -> ChatService:
    """Chat service for the stateless support widget (no database session)."""
    return ChatService(client)


def get_upload_service() -> ImageUploadService:
    """Image upload service over the configured storage backend."""
    settings = get_settings()
    return ImageUploadService(
        StorageFactory.create_storage_service(settings),
        allowed_types=settings.image_mime_types,
        max_size=settings.max_upload_size,
    )


# ---- Auth ----

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> UserResult | None:
    """Return current user from JWT if present; else None. Use for optional auth routes.

    A session is opened only when a token is presented, so anonymous requests
    never touch the database.
    """
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        return None
    async with get_session_factory()() as session:
        user = await UserRepository(session).get_by_id(payload["sub"])
    if not user or not user.is_active:
        return None
    return user


async def get_current_user(
    user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Require a valid bearer token for an active user."""
    if user is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def require_admin(
    user: Annotated[UserResult, Depends(get_current_user)],
) -> UserResult:
    """Require the admin role (admin panel and /admin API)."""
    if not user.is_admin:
        raise AuthorizationException(required_role=UserRole.ADMIN.value)
    return user


CurrentUser = Annotated[UserResult, Depends(get_current_user)]
OptionalUser = Annotated[UserResult | None, Depends(get_current_user_optional)]
AdminUser = Annotated[UserResult, Depends(require_admin)]
