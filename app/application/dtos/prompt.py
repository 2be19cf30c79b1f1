"""DTOs for prompt use cases (no dependency on ORM or presentation schemas)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PromptCreate:
    """Input for creating a prompt. Slug and prompt_code are assigned by the service."""

    title: str
    prompt_text: str
    status: str
    description: str | None = None
    image_url: str | None = None
    image_alt: str | None = None
    category_id: str | None = None
    model_id: str | None = None
    aspect_ratio: str | None = None
    style: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    meta_keywords: list[str] | None = None
    created_by: str | None = None


@dataclass(frozen=True)
class PromptResult:
    """Prompt read-model."""

    id: str
    title: str
    slug: str
    prompt_code: str
    prompt_text: str
    description: str | None
    image_url: str | None
    image_alt: str | None
    category_id: str | None
    model_id: str | None
    model_name: str | None
    aspect_ratio: str | None
    style: str | None
    status: str
    view_count: int
    like_count: int
    meta_title: str | None
    meta_description: str | None
    meta_keywords: list[str] | None
    created_by: str | None
    published_at: datetime | None
    created_at: datetime | None = None
    updated_at: datetime | None = None
