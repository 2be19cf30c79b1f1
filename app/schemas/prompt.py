"""Prompt API schemas."""

from datetime import datetime
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

Status = Literal["draft", "published", "archived"]


class PromptCreateRequest(BaseModel):
    """Request body for POST /admin/prompts. Slug and prompt code are generated."""

    title: str = Field(..., min_length=1, max_length=255)
    prompt_text: str = Field(..., min_length=1)
    status: Status = "draft"
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=2048)
    image_alt: str | None = Field(default=None, max_length=255)
    category_id: str | None = None
    model_id: str | None = None
    aspect_ratio: str | None = Field(default=None, max_length=20)
    style: str | None = Field(default=None, max_length=100)
    meta_title: str | None = Field(default=None, max_length=255)
    meta_description: str | None = None
    meta_keywords: list[str] | None = None


class PromptUpdateRequest(BaseModel):
    """Partial update; only fields that are set are applied."""

    NOT_NULL: ClassVar[frozenset[str]] = frozenset({"title", "slug", "prompt_text", "status"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=100)
    prompt_text: str | None = Field(default=None, min_length=1)
    status: Status | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=2048)
    image_alt: str | None = Field(default=None, max_length=255)
    category_id: str | None = None
    model_id: str | None = None
    aspect_ratio: str | None = Field(default=None, max_length=20)
    style: str | None = Field(default=None, max_length=100)
    meta_title: str | None = Field(default=None, max_length=255)
    meta_description: str | None = None
    meta_keywords: list[str] | None = None

    def changes(self) -> dict:
        """Fields the client set, minus nulls for columns that cannot be null."""
        data = self.model_dump(exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k not in self.NOT_NULL}


class PromptResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    slug: str
    prompt_code: str
    prompt_text: str
    description: str | None = None
    image_url: str | None = None
    image_alt: str | None = None
    category_id: str | None = None
    model_id: str | None = None
    model_name: str | None = None
    aspect_ratio: str | None = None
    style: str | None = None
    status: str
    view_count: int
    like_count: int
    meta_title: str | None = None
    meta_description: str | None = None
    meta_keywords: list[str] | None = None
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PromptListResponse(BaseModel):
    """Admin listing (any status) with total count."""

    items: list[PromptResponse]
    total: int
    skip: int
    limit: int


class LikeResponse(BaseModel):
    like_count: int
