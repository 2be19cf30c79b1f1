"""Blog article repository. Interface methods return application DTOs."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.blog import BlogCreate, BlogResult
from app.application.dtos.search import ContentSummary
from app.domain.enums import ContentStatus
from app.infrastructure.persistence.models.blog import Blog
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.search_repo import (
    published_blogs_stmt,
    rows_to_summaries,
)


def _blog_to_result(b: Blog) -> BlogResult:
    return BlogResult(
        id=b.id,
        title=b.title,
        slug=b.slug,
        excerpt=b.excerpt,
        content=b.content,
        featured_image=b.featured_image,
        image_alt=b.image_alt,
        category_id=b.category_id,
        author_id=b.author_id,
        status=b.status,
        view_count=b.view_count,
        meta_title=b.meta_title,
        meta_description=b.meta_description,
        published_at=b.published_at,
        created_at=b.created_at,
        updated_at=b.updated_at,
    )


class BlogRepository(BaseRepository[Blog]):
    UPDATABLE_FIELDS = frozenset(
        {
            "title", "slug", "excerpt", "content", "featured_image", "image_alt",
            "category_id", "status", "meta_title", "meta_description", "published_at",
        }
    )

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Blog)

    async def find_published(
        self, pattern: str, limit: int, order_by_popularity: bool = False
    ) -> list[ContentSummary]:
        result = await self.db.execute(
            published_blogs_stmt(pattern, limit, order_by_popularity)
        )
        return rows_to_summaries(result.mappings().all())

    async def get_by_id(self, blog_id: str) -> BlogResult | None:
        blog = await self._get(blog_id)
        return _blog_to_result(blog) if blog else None

    async def get_published_by_slug(self, slug: str) -> BlogResult | None:
        result = await self.db.execute(
            select(Blog).where(Blog.slug == slug, Blog.status == ContentStatus.PUBLISHED.value)
        )
        blog = result.scalar_one_or_none()
        return _blog_to_result(blog) if blog else None

    async def list_published(
        self, *, category_id: str | None = None, skip: int = 0, limit: int = 12
    ) -> list[BlogResult]:
        stmt = select(Blog).where(Blog.status == ContentStatus.PUBLISHED.value)
        if category_id:
            stmt = stmt.where(Blog.category_id == category_id)
        stmt = stmt.order_by(Blog.published_at.desc().nulls_last(), Blog.created_at.desc())
        result = await self.db.execute(stmt.offset(skip).limit(limit))
        return [_blog_to_result(b) for b in result.scalars().all()]

    async def list_all(
        self, *, status: str | None = None, skip: int = 0, limit: int = 20
    ) -> tuple[list[BlogResult], int]:
        criteria = [Blog.status == status] if status else []
        stmt = select(Blog)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(
            stmt.order_by(Blog.created_at.desc()).offset(skip).limit(limit)
        )
        items = [_blog_to_result(b) for b in result.scalars().all()]
        return items, await self._count(*criteria)

    async def slug_exists(self, slug: str, exclude_id: str | None = None) -> bool:
        criteria = [Blog.slug == slug]
        if exclude_id:
            criteria.append(Blog.id != exclude_id)
        return bool((await self.db.execute(select(exists().where(*criteria)))).scalar())

    async def create(
        self, data: BlogCreate, slug: str, published_at: datetime | None
    ) -> BlogResult:
        blog = Blog(
            title=data.title,
            slug=slug,
            excerpt=data.excerpt,
            content=data.content,
            featured_image=data.featured_image,
            image_alt=data.image_alt,
            category_id=data.category_id,
            author_id=data.author_id,
            status=data.status,
            meta_title=data.meta_title,
            meta_description=data.meta_description,
            published_at=published_at,
        )
        return _blog_to_result(await self._add(blog))

    async def update(self, blog_id: str, **fields: Any) -> BlogResult | None:
        blog = await self.update_fields(blog_id, **fields)
        return _blog_to_result(blog) if blog else None

    async def delete(self, blog_id: str) -> bool:
        return await self.delete_by_id(blog_id)

    async def increment_view_count(self, blog_id: str) -> None:
        await self.db.execute(
            update(Blog).where(Blog.id == blog_id).values(view_count=Blog.view_count + 1)
        )

    async def count(self) -> int:
        return await self._count()
