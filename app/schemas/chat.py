"""AI assistant API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """One user message to the assistant.

    command selects the assistant mode (chat, image, video); unknown values
    fall back to image prompt generation.
    """

    message: str = Field(..., min_length=1, max_length=4000)
    command: str | None = None
    conversation_id: str | None = None


class ChatResponse(BaseModel):
    response: str
    conversation_id: str | None = None


class SupportRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)


class SupportResponse(BaseModel):
    response: str


class ConversationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ChatMessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    role: str
    content: str
    command: str | None = None
    created_at: datetime | None = None
