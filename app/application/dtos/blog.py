"""DTOs for blog article use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BlogCreate:
    """Input for creating a blog article. Content is sanitized by the service."""

    title: str
    content: str
    status: str
    slug: str | None = None
    excerpt: str | None = None
    featured_image: str | None = None
    image_alt: str | None = None
    category_id: str | None = None
    author_id: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None


@dataclass(frozen=True)
class BlogResult:
    """Blog article read-model."""

    id: str
    title: str
    slug: str
    excerpt: str | None
    content: str
    featured_image: str | None
    image_alt: str | None
    category_id: str | None
    author_id: str | None
    status: str
    view_count: int
    meta_title: str | None
    meta_description: str | None
    published_at: datetime | None
    created_at: datetime | None = None
    updated_at: datetime | None = None
