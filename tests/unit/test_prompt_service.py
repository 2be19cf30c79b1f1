"""PromptService unit tests with mocked repository."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest

from app.application.dtos.prompt import PromptCreate, PromptResult
from app.application.services.prompt_service import (
    MAX_CODE_ATTEMPTS,
    PromptService,
    unique_slug,
)
from app.domain.exceptions import (
    DuplicateResourceException,
    PromptCodeExhaustedException,
    ResourceNotFoundException,
    ValidationException,
)


def _prompt_result(published_at: datetime | None = None, **overrides) -> PromptResult:
    values = dict(
        id="p1",
        title="Neon City",
        slug="neon-city",
        prompt_code="4521",
        prompt_text="neon street",
        description=None,
        image_url=None,
        image_alt=None,
        category_id=None,
        model_id=None,
        model_name=None,
        aspect_ratio=None,
        style=None,
        status="draft",
        view_count=0,
        like_count=0,
        meta_title=None,
        meta_description=None,
        meta_keywords=None,
        created_by=None,
        published_at=published_at,
    )
    values.update(overrides)
    return PromptResult(**values)


@pytest.fixture
def prompt_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.slug_exists = AsyncMock(return_value=False)
    repo.code_exists = AsyncMock(return_value=False)
    repo.create = AsyncMock(return_value=_prompt_result())
    repo.get_by_id = AsyncMock(return_value=_prompt_result())
    return repo


async def test_unique_slug_appends_suffix_until_free() -> None:
    taken = {"neon-city", "neon-city-2"}

    async def exists(slug: str, exclude_id: str | None) -> bool:
        return slug in taken

    assert await unique_slug("Neon City!", exists) == "neon-city-3"


async def test_unique_slug_rejects_title_without_letters() -> None:
    async def exists(slug: str, exclude_id: str | None) -> bool:
        return False

    with pytest.raises(ValidationException):
        await unique_slug("!!!", exists)


async def test_create_assigns_slug_code_and_publish_time(prompt_repo: AsyncMock) -> None:
    svc = PromptService(prompt_repo)
    with patch(
        "app.application.services.prompt_service.generate_prompt_code",
        side_effect=["0001", "0002"],
    ):
        prompt_repo.code_exists = AsyncMock(side_effect=[True, False])
        await svc.create_prompt(
            PromptCreate(title="Neon City", prompt_text="neon street", status="published")
        )
    data, slug, code, published_at = prompt_repo.create.await_args.args
    assert slug == "neon-city"
    assert code == "0002"
    assert published_at is not None


async def test_create_draft_has_no_publish_time(prompt_repo: AsyncMock) -> None:
    await PromptService(prompt_repo).create_prompt(
        PromptCreate(title="Neon City", prompt_text="neon street", status="draft")
    )
    assert prompt_repo.create.await_args.args[3] is None


async def test_create_gives_up_when_codes_exhausted(prompt_repo: AsyncMock) -> None:
    prompt_repo.code_exists = AsyncMock(return_value=True)
    with pytest.raises(PromptCodeExhaustedException):
        await PromptService(prompt_repo).create_prompt(
            PromptCreate(title="Neon", prompt_text="x", status="draft")
        )
    assert prompt_repo.code_exists.await_count == MAX_CODE_ATTEMPTS
    prompt_repo.create.assert_not_awaited()


async def test_create_rejects_unknown_status_and_blank_text(prompt_repo: AsyncMock) -> None:
    svc = PromptService(prompt_repo)
    with pytest.raises(ValidationException):
        await svc.create_prompt(PromptCreate(title="Neon", prompt_text="x", status="live"))
    with pytest.raises(ValidationException):
        await svc.create_prompt(PromptCreate(title="Neon", prompt_text="  ", status="draft"))


async def test_publishing_stamps_published_at_once(prompt_repo: AsyncMock) -> None:
    svc = PromptService(prompt_repo)
    await svc.update_prompt("p1", status="published")
    assert "published_at" in prompt_repo.update.await_args.kwargs

    prompt_repo.get_by_id = AsyncMock(
        return_value=_prompt_result(published_at=datetime(2025, 1, 1, tzinfo=timezone.utc))
    )
    await svc.update_prompt("p1", status="published")
    assert "published_at" not in prompt_repo.update.await_args.kwargs


async def test_update_rejects_taken_slug(prompt_repo: AsyncMock) -> None:
    prompt_repo.slug_exists = AsyncMock(return_value=True)
    with pytest.raises(DuplicateResourceException):
        await PromptService(prompt_repo).update_prompt("p1", slug="taken-slug")
    prompt_repo.slug_exists.assert_awaited_once_with("taken-slug", exclude_id="p1")


async def test_view_published_counts_a_view(prompt_repo: AsyncMock) -> None:
    prompt_repo.get_published_by_slug = AsyncMock(return_value=_prompt_result(status="published"))
    prompt = await PromptService(prompt_repo).view_published("neon-city")
    assert prompt.id == "p1"
    prompt_repo.increment_view_count.assert_awaited_once_with("p1")


async def test_like_unknown_slug_is_not_found(prompt_repo: AsyncMock) -> None:
    prompt_repo.get_published_by_slug = AsyncMock(return_value=None)
    with pytest.raises(ResourceNotFoundException):
        await PromptService(prompt_repo).like("missing")


async def test_delete_missing_is_not_found(prompt_repo: AsyncMock) -> None:
    prompt_repo.delete = AsyncMock(return_value=False)
    with pytest.raises(ResourceNotFoundException):
        await PromptService(prompt_repo).delete_prompt("nope")
