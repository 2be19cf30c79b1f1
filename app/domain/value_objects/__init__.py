"""Domain value objects and shared value types."""

from app.domain.value_objects.core import PromptCode, Slug, slugify

__all__ = [
    "PromptCode",
    "Slug",
    "slugify",
]
