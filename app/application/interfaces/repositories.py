"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.blog import BlogCreate, BlogResult
    from app.application.dtos.category import CategoryResult
    from app.application.dtos.chat import (
        ChatMessageResult,
        ChatTurn,
        ConversationResult,
    )
    from app.application.dtos.contact import ContactResult
    from app.application.dtos.prompt import PromptCreate, PromptResult
    from app.application.dtos.search import ContentSummary
    from app.application.dtos.user import UserResult


# Search read ports (one per collection)
class IPromptSearchRepository(Protocol):
    """Read port used by the search fetcher for the prompt collection."""

    async def find_published(
        self, pattern: str, limit: int, order_by_popularity: bool = False
    ) -> list[ContentSummary]:
        """Published prompts whose title, slug, description or prompt_text ILIKE pattern."""

    async def get_published_slug_by_code(self, code: str) -> str | None:
        """Slug of the published prompt with this 4-digit code, or None."""


class IArticleSearchRepository(Protocol):
    """Read port used by the search fetcher for the blog collection."""

    async def find_published(
        self, pattern: str, limit: int, order_by_popularity: bool = False
    ) -> list[ContentSummary]:
        """Published blogs whose title, slug, excerpt or content ILIKE pattern."""


class IPromptRepository(IPromptSearchRepository, Protocol):
    """Protocol for prompt repository (DIP)."""

    async def get_by_id(self, prompt_id: str) -> PromptResult | None:
        """Return prompt by ID (any status)."""

    async def get_published_by_slug(self, slug: str) -> PromptResult | None:
        """Return published prompt by slug."""

    async def list_published(
        self,
        *,
        category_slug: str | None = None,
        model_id: str | None = None,
        popular: bool = False,
        skip: int = 0,
        limit: int = 24,
    ) -> list[PromptResult]:
        """Return published prompts (newest or most viewed first)."""

    async def list_all(
        self, *, status: str | None = None, skip: int = 0, limit: int = 20
    ) -> tuple[list[PromptResult], int]:
        """Return prompts of any status (admin) with total count."""

    async def slug_exists(self, slug: str, exclude_id: str | None = None) -> bool:
        """Return True if another prompt already uses slug."""

    async def code_exists(self, code: str) -> bool:
        """Return True if the prompt code is taken."""

    async def create(
        self, data: PromptCreate, slug: str, prompt_code: str, published_at: datetime | None
    ) -> PromptResult:
        """Insert a prompt and return it."""

    async def update(self, prompt_id: str, **fields: Any) -> PromptResult | None:
        """Apply partial update; None if not found."""

    async def delete(self, prompt_id: str) -> bool:
        """Delete prompt; False if not found."""

    async def increment_view_count(self, prompt_id: str) -> None:
        """Atomically add one view."""

    async def increment_like_count(self, prompt_id: str) -> int:
        """Atomically add one like and return the new count."""

    async def count(self, status: str | None = None) -> int:
        """Count prompts (optionally by status)."""


class IBlogRepository(IArticleSearchRepository, Protocol):
    """Protocol for blog article repository (DIP)."""

    async def get_by_id(self, blog_id: str) -> BlogResult | None:
        """Return blog by ID (any status)."""

    async def get_published_by_slug(self, slug: str) -> BlogResult | None:
        """Return published blog by slug."""

    async def list_published(
        self, *, category_id: str | None = None, skip: int = 0, limit: int = 12
    ) -> list[BlogResult]:
        """Return published blogs, newest first."""

    async def list_all(
        self, *, status: str | None = None, skip: int = 0, limit: int = 20
    ) -> tuple[list[BlogResult], int]:
        """Return blogs of any status (admin) with total count."""

    async def slug_exists(self, slug: str, exclude_id: str | None = None) -> bool:
        """Return True if another blog already uses slug."""

    async def create(
        self, data: BlogCreate, slug: str, published_at: datetime | None
    ) -> BlogResult:
        """Insert a blog and return it."""

    async def update(self, blog_id: str, **fields: Any) -> BlogResult | None:
        """Apply partial update; None if not found."""

    async def delete(self, blog_id: str) -> bool:
        """Delete blog; False if not found."""

    async def increment_view_count(self, blog_id: str) -> None:
        """Atomically add one view."""

    async def count(self) -> int:
        """Count blogs."""


class ICategoryRepository(Protocol):
    """Protocol for category repository (DIP)."""

    async def get_by_id(self, category_id: str) -> CategoryResult | None:
        """Return category by ID."""

    async def get_by_slug(self, slug: str) -> CategoryResult | None:
        """Return category by slug."""

    async def list_categories(
        self,
        *,
        header: bool | None = None,
        footer: bool | None = None,
        showcase: bool | None = None,
        featured: bool | None = None,
        limit: int | None = None,
        with_counts: bool = False,
    ) -> list[CategoryResult]:
        """Return categories ordered by sort_order, optionally filtered by placement flags."""

    async def create(self, **fields: Any) -> CategoryResult:
        """Insert a category (sort_order appended at the end)."""

    async def update(self, category_id: str, **fields: Any) -> CategoryResult | None:
        """Apply partial update; None if not found."""

    async def delete(self, category_id: str) -> bool:
        """Delete category; False if not found."""

    async def swap_sort_order(self, first_id: str, second_id: str) -> None:
        """Swap sort_order of two categories."""

    async def count(self) -> int:
        """Count categories."""


class IContactRepository(Protocol):
    """Protocol for contact query repository."""

    async def create(
        self, name: str, email: str, subject: str | None, message: str
    ) -> ContactResult:
        """Store a contact query with status 'new'."""

    async def list_contacts(self, *, status: str | None = None) -> list[ContactResult]:
        """Return contact queries, newest first."""

    async def update(self, contact_id: str, **fields: Any) -> ContactResult | None:
        """Apply partial update; None if not found."""

    async def delete(self, contact_id: str) -> bool:
        """Delete; False if not found."""

    async def count(self, status: str | None = None) -> int:
        """Count contact queries (optionally by status)."""


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID."""

    async def get_by_email(self, email: str) -> UserResult | None:
        """Return user by email (case-insensitive)."""

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        """Return user if email/password match and user is active."""

    async def create_user(
        self,
        email: str,
        password: str,
        full_name: str | None = None,
        role: str = "user",
    ) -> UserResult:
        """Create user with hashed password."""

    async def list_users(self, *, skip: int = 0, limit: int = 20) -> tuple[list[UserResult], int]:
        """Return users newest first with total count."""

    async def update(self, user_id: str, **fields: Any) -> UserResult | None:
        """Apply partial update (role, full_name, avatar_url); None if not found."""

    async def count(self) -> int:
        """Count users."""


class ISettingRepository(Protocol):
    """Protocol for site settings (key/value)."""

    async def get_all(self) -> dict[str, str]:
        """Return stored settings."""

    async def upsert_many(self, values: dict[str, str]) -> None:
        """Insert or update each key."""

    async def delete_all(self) -> None:
        """Remove all stored settings (reset to defaults)."""


class IChatRepository(Protocol):
    """Protocol for chat conversation persistence."""

    async def create_conversation(self, user_id: str, title: str) -> ConversationResult:
        """Create a conversation owned by user_id."""

    async def get_conversation(
        self, conversation_id: str, user_id: str
    ) -> ConversationResult | None:
        """Return conversation if owned by user_id."""

    async def list_conversations(self, user_id: str) -> list[ConversationResult]:
        """Return user's conversations, most recently updated first."""

    async def recent_turns(self, conversation_id: str, limit: int) -> list[ChatTurn]:
        """Return up to limit messages (oldest first) as LLM turns."""

    async def list_messages(self, conversation_id: str) -> list[ChatMessageResult]:
        """Return all messages of a conversation, oldest first."""

    async def add_message(
        self, conversation_id: str, role: str, content: str, command: str | None
    ) -> ChatMessageResult:
        """Append a message."""

    async def touch_conversation(self, conversation_id: str) -> None:
        """Bump updated_at."""

    async def delete_conversation(self, conversation_id: str, user_id: str) -> bool:
        """Delete conversation owned by user_id; False if not found."""
