"""Blog article application service."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any

from app.application.dtos.blog import BlogCreate, BlogResult
from app.application.services.prompt_service import unique_slug, validate_status
from app.domain.enums import ContentStatus
from app.domain.exceptions import (
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)
from app.domain.value_objects import Slug
from app.shared.utils.datetime import utc_now
from app.shared.utils.sanitization import ContentSanitizer

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IBlogRepository

logger = logging.getLogger(__name__)


class BlogService:
    """Create, edit and read articles. Article HTML is cleaned on every write."""

    def __init__(self, blog_repo: "IBlogRepository") -> None:
        self.blog_repo = blog_repo

    async def _checked_slug(self, slug: str, exclude_id: str | None) -> str:
        try:
            value = Slug(slug).value
        except ValueError as e:
            raise ValidationException(str(e), field="slug") from e
        if await self.blog_repo.slug_exists(value, exclude_id=exclude_id):
            raise DuplicateResourceException("blog", "slug", value)
        return value

    async def create_blog(self, data: BlogCreate) -> BlogResult:
        validate_status(data.status)
        if data.slug:
            slug = await self._checked_slug(data.slug, None)
        else:
            slug = await unique_slug(data.title, self.blog_repo.slug_exists)
        data = dataclasses.replace(data, content=ContentSanitizer.clean_article(data.content))
        published_at = utc_now() if data.status == ContentStatus.PUBLISHED.value else None
        blog = await self.blog_repo.create(data, slug, published_at)
        logger.info("Created blog %s (%s)", blog.id, data.status)
        return blog

    async def update_blog(self, blog_id: str, **fields: Any) -> BlogResult:
        existing = await self.get_blog(blog_id)
        if fields.get("slug"):
            fields["slug"] = await self._checked_slug(fields["slug"], blog_id)
        if fields.get("content") is not None:
            fields["content"] = ContentSanitizer.clean_article(fields["content"])
        status = fields.get("status")
        if status is not None:
            validate_status(status)
            if status == ContentStatus.PUBLISHED.value and existing.published_at is None:
                fields["published_at"] = utc_now()
        updated = await self.blog_repo.update(blog_id, **fields)
        if updated is None:
            raise ResourceNotFoundException("blog", blog_id)
        return updated

    async def delete_blog(self, blog_id: str) -> None:
        if not await self.blog_repo.delete(blog_id):
            raise ResourceNotFoundException("blog", blog_id)

    async def get_blog(self, blog_id: str) -> BlogResult:
        blog = await self.blog_repo.get_by_id(blog_id)
        if blog is None:
            raise ResourceNotFoundException("blog", blog_id)
        return blog

    async def view_published(self, slug: str) -> BlogResult:
        blog = await self.blog_repo.get_published_by_slug(slug)
        if blog is None:
            raise ResourceNotFoundException("blog", slug)
        await self.blog_repo.increment_view_count(blog.id)
        return blog

    async def list_published(
        self, *, category_id: str | None = None, skip: int = 0, limit: int = 12
    ) -> list[BlogResult]:
        return await self.blog_repo.list_published(
            category_id=category_id, skip=skip, limit=limit
        )

    async def list_all(
        self, *, status: str | None = None, skip: int = 0, limit: int = 20
    ) -> tuple[list[BlogResult], int]:
        if status is not None:
            validate_status(status)
        return await self.blog_repo.list_all(status=status, skip=skip, limit=limit)
