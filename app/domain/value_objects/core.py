"""Domain value objects for the Pixico application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass

# Shared slug pattern: lowercase alphanumeric with optional hyphens (e.g. neon-city).
_SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
_PROMPT_CODE_RE = re.compile(r"^\d{4}$")

SLUG_MAX_LENGTH = 100


def slugify(text: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Build a URL slug from a title.

    Lowercases, drops anything that is not a-z, 0-9, whitespace or hyphen,
    turns whitespace runs into hyphens and collapses repeated hyphens.
    """
    value = text.lower()
    value = re.sub(r"[^a-z0-9\s-]", "", value)
    value = re.sub(r"\s+", "-", value.strip())
    value = re.sub(r"-+", "-", value)
    return value[:max_length].strip("-")


@dataclass(frozen=True)
class Slug:
    """Value object for a content slug (prompt, blog, category).

    Lowercase alphanumeric with optional hyphens, 1-100 characters.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Slug must be a non-empty string")
        if len(self.value) > SLUG_MAX_LENGTH:
            raise ValueError(f"Slug must not exceed {SLUG_MAX_LENGTH} characters")
        if not _SLUG_RE.match(self.value):
            raise ValueError(
                "Slug must be lowercase alphanumeric with optional hyphens "
                "(e.g., 'neon-city', 'cyberpunk-portrait')"
            )

    @classmethod
    def from_title(cls, title: str) -> "Slug":
        """Derive a slug from a title. Raises ValueError if nothing usable remains."""
        return cls(slugify(title))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PromptCode:
    """Public 4-digit prompt code (e.g. '0427'), searchable as '#0427'."""

    value: str

    def __post_init__(self) -> None:
        if not _PROMPT_CODE_RE.match(self.value or ""):
            raise ValueError("Prompt code must be exactly 4 digits")

    def __str__(self) -> str:
        return self.value
