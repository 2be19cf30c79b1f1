"""DTOs for category configuration (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryResult:
    """Category read-model. prompt_count is filled only by admin listings."""

    id: str
    name: str
    slug: str
    icon: str | None
    image_url: str | None
    description: str | None
    show_in_header: bool
    show_in_footer: bool
    show_in_showcase: bool
    show_in_featured: bool
    sort_order: int
    prompt_count: int | None = None
