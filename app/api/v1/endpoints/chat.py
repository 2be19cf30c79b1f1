"""AI assistant API: prompt-engineering chat, saved conversations and support bot.

Anonymous callers get single-turn answers; signed-in users get persisted
conversations whose recent history is sent back as context.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from app.api.v1.dependencies import (
    CurrentUser,
    OptionalUser,
    get_chat_service,
    get_support_chat_service,
)
from app.application.services.chat_service import ChatService
from app.core.limiter import limit_chat
from app.schemas.chat import (
    ChatMessageResponse,
    ChatRequest,
    ChatResponse,
    ConversationResponse,
    SupportRequest,
    SupportResponse,
)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
@limit_chat
async def chat(
    request: Request,
    body: ChatRequest,
    user: OptionalUser,
    chat_svc: Annotated[ChatService, Depends(get_chat_service)],
):
    reply = await chat_svc.send(
        body.message,
        command=body.command,
        user_id=user.id if user else None,
        conversation_id=body.conversation_id,
    )
    return ChatResponse(response=reply.response, conversation_id=reply.conversation_id)


@router.get("/chat/conversations", response_model=list[ConversationResponse])
async def list_conversations(
    user: CurrentUser,
    chat_svc: Annotated[ChatService, Depends(get_chat_service)],
):
    """Current user's conversations, most recently active first."""
    items = await chat_svc.list_conversations(user.id)
    return [ConversationResponse.model_validate(c) for c in items]


@router.get(
    "/chat/conversations/{conversation_id}/messages",
    response_model=list[ChatMessageResponse],
)
async def list_messages(
    conversation_id: str,
    user: CurrentUser,
    chat_svc: Annotated[ChatService, Depends(get_chat_service)],
):
    items = await chat_svc.list_messages(conversation_id, user.id)
    return [ChatMessageResponse.model_validate(m) for m in items]


@router.delete("/chat/conversations/{conversation_id}", status_code=204)
async def delete_conversation(
    conversation_id: str,
    user: CurrentUser,
    chat_svc: Annotated[ChatService, Depends(get_chat_service)],
):
    await chat_svc.delete_conversation(conversation_id, user.id)
    return Response(status_code=204)


@router.post("/support", response_model=SupportResponse)
@limit_chat
async def support(
    request: Request,
    body: SupportRequest,
    chat_svc: Annotated[ChatService, Depends(get_support_chat_service)],
):
    """Site help bot (no history, no account required)."""
    return SupportResponse(response=await chat_svc.support(body.message))
