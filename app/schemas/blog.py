"""Blog API schemas."""

from datetime import datetime
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

Status = Literal["draft", "published", "archived"]


class BlogCreateRequest(BaseModel):
    """Request body for POST /admin/blogs. Content is sanitized before storage."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    status: Status = "draft"
    slug: str | None = Field(default=None, min_length=1, max_length=100)
    excerpt: str | None = None
    featured_image: str | None = Field(default=None, max_length=2048)
    image_alt: str | None = Field(default=None, max_length=255)
    category_id: str | None = None
    meta_title: str | None = Field(default=None, max_length=255)
    meta_description: str | None = None


class BlogUpdateRequest(BaseModel):
    NOT_NULL: ClassVar[frozenset[str]] = frozenset({"title", "slug", "content", "status"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    status: Status | None = None
    slug: str | None = Field(default=None, min_length=1, max_length=100)
    excerpt: str | None = None
    featured_image: str | None = Field(default=None, max_length=2048)
    image_alt: str | None = Field(default=None, max_length=255)
    category_id: str | None = None
    meta_title: str | None = Field(default=None, max_length=255)
    meta_description: str | None = None

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k not in self.NOT_NULL}


class BlogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    slug: str
    excerpt: str | None = None
    content: str
    featured_image: str | None = None
    image_alt: str | None = None
    category_id: str | None = None
    author_id: str | None = None
    status: str
    view_count: int
    meta_title: str | None = None
    meta_description: str | None = None
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BlogListResponse(BaseModel):
    items: list[BlogResponse]
    total: int
    skip: int
    limit: int
