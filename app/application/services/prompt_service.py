"""Prompt application service: slugs, public codes, publish timestamps."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.application.dtos.prompt import PromptCreate, PromptResult
from app.domain.enums import ContentStatus
from app.domain.exceptions import (
    DuplicateResourceException,
    PromptCodeExhaustedException,
    ResourceNotFoundException,
    ValidationException,
)
from app.domain.value_objects import Slug, slugify
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_prompt_code

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IPromptRepository

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 25
MAX_SLUG_SUFFIX = 50


def validate_status(status: str) -> str:
    if status not in ContentStatus.values():
        raise ValidationException(f"Invalid status '{status}'", field="status")
    return status


async def unique_slug(
    title: str,
    exists: Any,
    exclude_id: str | None = None,
) -> str:
    """Slug from title; '-2', '-3'... appended until exists(slug, exclude_id) is False."""
    base = slugify(title)
    if not base:
        raise ValidationException(
            "Title must contain at least one letter or digit", field="title"
        )
    if not await exists(base, exclude_id):
        return base
    for n in range(2, MAX_SLUG_SUFFIX + 1):
        suffix = f"-{n}"
        candidate = base[: 100 - len(suffix)].rstrip("-") + suffix
        if not await exists(candidate, exclude_id):
            return candidate
    raise DuplicateResourceException("slug", "slug", base)


class PromptService:
    """Create, edit, publish and read prompts."""

    def __init__(self, prompt_repo: "IPromptRepository") -> None:
        self.prompt_repo = prompt_repo

    async def _allocate_code(self) -> str:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = generate_prompt_code()
            if not await self.prompt_repo.code_exists(code):
                return code
        logger.error("No free prompt code after %d attempts", MAX_CODE_ATTEMPTS)
        raise PromptCodeExhaustedException(MAX_CODE_ATTEMPTS)

    async def create_prompt(self, data: PromptCreate) -> PromptResult:
        validate_status(data.status)
        if not data.prompt_text.strip():
            raise ValidationException("Prompt text is required", field="prompt_text")
        slug = await unique_slug(data.title, self.prompt_repo.slug_exists)
        code = await self._allocate_code()
        published_at = utc_now() if data.status == ContentStatus.PUBLISHED.value else None
        prompt = await self.prompt_repo.create(data, slug, code, published_at)
        logger.info("Created prompt %s (code %s, %s)", prompt.id, code, data.status)
        return prompt

    async def update_prompt(self, prompt_id: str, **fields: Any) -> PromptResult:
        """Partial update. Setting status to published stamps published_at once."""
        existing = await self.get_prompt(prompt_id)
        if fields.get("slug"):
            try:
                slug = Slug(fields["slug"]).value
            except ValueError as e:
                raise ValidationException(str(e), field="slug") from e
            if await self.prompt_repo.slug_exists(slug, exclude_id=prompt_id):
                raise DuplicateResourceException("prompt", "slug", slug)
            fields["slug"] = slug
        status = fields.get("status")
        if status is not None:
            validate_status(status)
            if status == ContentStatus.PUBLISHED.value and existing.published_at is None:
                fields["published_at"] = utc_now()
        updated = await self.prompt_repo.update(prompt_id, **fields)
        if updated is None:
            raise ResourceNotFoundException("prompt", prompt_id)
        return updated

    async def delete_prompt(self, prompt_id: str) -> None:
        if not await self.prompt_repo.delete(prompt_id):
            raise ResourceNotFoundException("prompt", prompt_id)

    async def get_prompt(self, prompt_id: str) -> PromptResult:
        prompt = await self.prompt_repo.get_by_id(prompt_id)
        if prompt is None:
            raise ResourceNotFoundException("prompt", prompt_id)
        return prompt

    async def view_published(self, slug: str) -> PromptResult:
        """Published prompt by slug; counts a view."""
        prompt = await self.prompt_repo.get_published_by_slug(slug)
        if prompt is None:
            raise ResourceNotFoundException("prompt", slug)
        await self.prompt_repo.increment_view_count(prompt.id)
        return prompt

    async def like(self, slug: str) -> int:
        prompt = await self.prompt_repo.get_published_by_slug(slug)
        if prompt is None:
            raise ResourceNotFoundException("prompt", slug)
        return await self.prompt_repo.increment_like_count(prompt.id)

    async def list_published(self, **filters: Any) -> list[PromptResult]:
        return await self.prompt_repo.list_published(**filters)

    async def list_all(
        self, *, status: str | None = None, skip: int = 0, limit: int = 20
    ) -> tuple[list[PromptResult], int]:
        if status is not None:
            validate_status(status)
        return await self.prompt_repo.list_all(status=status, skip=skip, limit=limit)
