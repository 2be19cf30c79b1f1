"""Chat assistant conversations and messages (signed-in users only)."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import EntityModel
from app.shared.utils.datetime import utc_now


class ChatConversation(EntityModel, Base):
    __tablename__ = "chat_conversation"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(60), nullable=False)


class ChatMessage(EntityModel, Base):
    __tablename__ = "chat_message"

    conversation_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("chat_conversation.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    command: Mapped[str | None] = mapped_column(String(20), nullable=True)
    # now() is fixed per transaction; messages written together need distinct times.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
