"""DTOs for the AI chat assistant."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ChatTurn:
    """One message in the shape the LLM API expects (role + content)."""

    role: str
    content: str


@dataclass(frozen=True)
class ConversationResult:
    """Stored conversation header."""

    id: str
    user_id: str
    title: str
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class ChatMessageResult:
    """Stored chat message."""

    id: str
    conversation_id: str
    role: str
    content: str
    command: str | None
    created_at: datetime | None


@dataclass(frozen=True)
class ChatReply:
    """Assistant reply returned to the caller."""

    response: str
    conversation_id: str | None
