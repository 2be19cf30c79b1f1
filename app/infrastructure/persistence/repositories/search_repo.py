"""Search reads over published prompts and blog articles.

Matching is a case-insensitive substring test (ILIKE) OR-ed across the
text columns of each collection. The pattern arrives already escaped
(see app.domain.search.escape_like), so the statements declare the
backslash escape character.

The search use case runs the prompt and article reads concurrently. One
AsyncSession cannot serve two statements at once, so these repositories
open a short-lived session per read from the session factory.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.search import ContentSummary
from app.domain.enums import ContentStatus
from app.domain.search import LIKE_ESCAPE_CHAR
from app.infrastructure.persistence.models.blog import Blog
from app.infrastructure.persistence.models.prompt import Prompt


def _matches(pattern: str, *columns: Any) -> Any:
    return or_(*(col.ilike(pattern, escape=LIKE_ESCAPE_CHAR) for col in columns))


def published_prompts_stmt(pattern: str, limit: int, order_by_popularity: bool) -> Select:
    stmt = select(
        Prompt.id,
        Prompt.title,
        Prompt.slug,
        Prompt.image_url,
        Prompt.status,
        Prompt.view_count,
    ).where(
        Prompt.status == ContentStatus.PUBLISHED.value,
        _matches(pattern, Prompt.title, Prompt.slug, Prompt.description, Prompt.prompt_text),
    )
    if order_by_popularity:
        stmt = stmt.order_by(Prompt.view_count.desc(), Prompt.created_at.desc())
    else:
        stmt = stmt.order_by(Prompt.created_at)
    return stmt.limit(limit)


def published_blogs_stmt(pattern: str, limit: int, order_by_popularity: bool) -> Select:
    stmt = select(
        Blog.id,
        Blog.title,
        Blog.slug,
        Blog.featured_image.label("image_url"),
        Blog.status,
        Blog.view_count,
    ).where(
        Blog.status == ContentStatus.PUBLISHED.value,
        _matches(pattern, Blog.title, Blog.slug, Blog.excerpt, Blog.content),
    )
    if order_by_popularity:
        stmt = stmt.order_by(Blog.view_count.desc(), Blog.created_at.desc())
    else:
        stmt = stmt.order_by(Blog.created_at)
    return stmt.limit(limit)


def published_slug_by_code_stmt(code: str) -> Select:
    return select(Prompt.slug).where(
        Prompt.status == ContentStatus.PUBLISHED.value,
        Prompt.prompt_code == code,
    )


def rows_to_summaries(rows: Any) -> list[ContentSummary]:
    return [
        ContentSummary(
            id=row["id"],
            title=row["title"],
            slug=row["slug"],
            image_url=row["image_url"],
            status=row["status"],
            view_count=row["view_count"] or 0,
        )
        for row in rows
    ]


class PromptSearchRepository:
    """Prompt reads for search, each in its own session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def find_published(
        self, pattern: str, limit: int, order_by_popularity: bool = False
    ) -> list[ContentSummary]:
        async with self.session_factory() as session:
            result = await session.execute(
                published_prompts_stmt(pattern, limit, order_by_popularity)
            )
            return rows_to_summaries(result.mappings().all())

    async def get_published_slug_by_code(self, code: str) -> str | None:
        async with self.session_factory() as session:
            result = await session.execute(published_slug_by_code_stmt(code))
            return result.scalar_one_or_none()


class ArticleSearchRepository:
    """Blog article reads for search, each in its own session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def find_published(
        self, pattern: str, limit: int, order_by_popularity: bool = False
    ) -> list[ContentSummary]:
        async with self.session_factory() as session:
            result = await session.execute(
                published_blogs_stmt(pattern, limit, order_by_popularity)
            )
            return rows_to_summaries(result.mappings().all())
