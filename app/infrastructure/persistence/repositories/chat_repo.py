"""Chat conversation and message repository."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from app.application.dtos.chat import ChatMessageResult, ChatTurn, ConversationResult
from app.infrastructure.persistence.models.chat import ChatConversation, ChatMessage


def _conversation_to_result(c: ChatConversation) -> ConversationResult:
    return ConversationResult(
        id=c.id,
        user_id=c.user_id,
        title=c.title,
        created_at=c.created_at,
        updated_at=c.updated_at,
    )


def _message_to_result(m: ChatMessage) -> ChatMessageResult:
    return ChatMessageResult(
        id=m.id,
        conversation_id=m.conversation_id,
        role=m.role,
        content=m.content,
        command=m.command,
        created_at=m.created_at,
    )


class ChatRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_conversation(self, user_id: str, title: str) -> ConversationResult:
        conversation = ChatConversation(user_id=user_id, title=title)
        self.db.add(conversation)
        await self.db.flush()
        await self.db.refresh(conversation)
        return _conversation_to_result(conversation)

    async def get_conversation(
        self, conversation_id: str, user_id: str
    ) -> ConversationResult | None:
        result = await self.db.execute(
            select(ChatConversation).where(
                ChatConversation.id == conversation_id,
                ChatConversation.user_id == user_id,
            )
        )
        conversation = result.scalar_one_or_none()
        return _conversation_to_result(conversation) if conversation else None

    async def list_conversations(self, user_id: str) -> list[ConversationResult]:
        result = await self.db.execute(
            select(ChatConversation)
            .where(ChatConversation.user_id == user_id)
            .order_by(ChatConversation.updated_at.desc())
        )
        return [_conversation_to_result(c) for c in result.scalars().all()]

    async def recent_turns(self, conversation_id: str, limit: int) -> list[ChatTurn]:
        """Latest `limit` messages, returned oldest first."""
        result = await self.db.execute(
            select(ChatMessage.role, ChatMessage.content)
            .where(ChatMessage.conversation_id == conversation_id)
            .order_by(ChatMessage.created_at.desc())
            .limit(limit)
        )
        rows = list(result.tuples().all())
        return [ChatTurn(role=role, content=content) for role, content in reversed(rows)]

    async def list_messages(self, conversation_id: str) -> list[ChatMessageResult]:
        result = await self.db.execute(
            select(ChatMessage)
            .where(ChatMessage.conversation_id == conversation_id)
            .order_by(ChatMessage.created_at)
        )
        return [_message_to_result(m) for m in result.scalars().all()]

    async def add_message(
        self, conversation_id: str, role: str, content: str, command: str | None
    ) -> ChatMessageResult:
        message = ChatMessage(
            conversation_id=conversation_id, role=role, content=content, command=command
        )
        self.db.add(message)
        await self.db.flush()
        await self.db.refresh(message)
        return _message_to_result(message)

    async def touch_conversation(self, conversation_id: str) -> None:
        await self.db.execute(
            update(ChatConversation)
            .where(ChatConversation.id == conversation_id)
            .values(updated_at=func.now())
        )

    async def delete_conversation(self, conversation_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            delete(ChatConversation).where(
                ChatConversation.id == conversation_id,
                ChatConversation.user_id == user_id,
            )
        )
        return bool(result.rowcount)
