"""Service interfaces (ports) for the application layer.

Protocols define contracts for external services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.chat import ChatTurn


class IChatCompletionClient(Protocol):
    """Protocol for a chat completion API (OpenRouter-compatible)."""

    async def complete(
        self,
        messages: list[ChatTurn],
        *,
        max_tokens: int,
        temperature: float = 0.7,
        title: str | None = None,
    ) -> str:
        """Return the assistant message content for the given turns."""


class IStorageService(Protocol):
    """Protocol for public image storage (local, S3-compatible)."""

    async def upload(
        self, data: bytes, storage_ref: str, content_type: str
    ) -> str:
        """Store bytes under storage_ref and return the public URL."""

    async def delete(self, storage_ref: str) -> bool:
        """Delete object. Returns True if deleted, False if not found."""

    def public_url(self, storage_ref: str) -> str:
        """Return the public URL for storage_ref."""
