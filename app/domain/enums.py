"""Domain enumerations for the Pixico application.

Enums represent fixed sets of domain values (e.g. publication status).
"""

from enum import Enum


class ContentStatus(str, Enum):
    """Publication status shared by prompts and blog articles.

    Only published content is visible on public pages and in search.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]


class ResultKind(str, Enum):
    """Origin collection of a search hit."""

    PROMPT = "prompt"
    ARTICLE = "article"


class UserRole(str, Enum):
    """Profile role. Admins can use the dashboard endpoints."""

    USER = "user"
    ADMIN = "admin"


class ContactStatus(str, Enum):
    """Triage status of a contact query."""

    NEW = "new"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


class ChatCommand(str, Enum):
    """Assistant mode; selects the system prompt."""

    CHAT = "chat"
    IMAGE = "image"
    VIDEO = "video"

    @classmethod
    def parse(cls, value: str | None) -> "ChatCommand":
        """Return the matching command; unknown or missing values fall back to IMAGE."""
        try:
            return cls(value) if value else cls.IMAGE
        except ValueError:
            return cls.IMAGE


class ChatRole(str, Enum):
    """Author of a stored chat message."""

    USER = "user"
    ASSISTANT = "assistant"
