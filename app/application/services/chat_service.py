"""Pixico AI assistant: prompt-engineering chat and the support bot.

Signed-in users get a persisted conversation whose recent messages are sent
back to the model as context. Anonymous callers get single-turn answers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.chat import (
    ChatMessageResult,
    ChatReply,
    ChatTurn,
    ConversationResult,
)
from app.application.services.chat_prompts import SUPPORT_PROMPT, system_prompt_for
from app.domain.enums import ChatCommand, ChatRole
from app.domain.exceptions import ResourceNotFoundException, ValidationException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IChatRepository
    from app.application.interfaces.services import IChatCompletionClient

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 50
CHAT_MAX_TOKENS = 2048
SUPPORT_MAX_TOKENS = 500
TEMPERATURE = 0.7
MAX_MESSAGE_LENGTH = 4000

CHAT_FALLBACK_REPLY = "Sorry, I could not generate a response."
SUPPORT_FALLBACK_REPLY = (
    "Sorry, I am having trouble connecting right now. "
    "Please try again later or head to our contact page."
)


def strip_markdown_emphasis(text: str) -> str:
    """Drop markdown bold/italic asterisks the model was told not to use."""
    return text.replace("*", "")


def conversation_title(message: str) -> str:
    title = message[:TITLE_MAX_LENGTH]
    return title + "..." if len(message) > TITLE_MAX_LENGTH else title


def _require_message(message: str | None) -> str:
    if not message or not message.strip():
        raise ValidationException("Message is required", field="message")
    if len(message) > MAX_MESSAGE_LENGTH:
        raise ValidationException(
            f"Message must not exceed {MAX_MESSAGE_LENGTH} characters", field="message"
        )
    return message


class ChatService:
    def __init__(
        self,
        client: "IChatCompletionClient",
        chat_repo: "IChatRepository | None" = None,
        history_limit: int = 20,
    ) -> None:
        self.client = client
        self._chat_repo = chat_repo
        self.history_limit = history_limit

    @property
    def chat_repo(self) -> "IChatRepository":
        """Conversation store; the stateless support bot is built without one."""
        if self._chat_repo is None:
            raise RuntimeError("ChatService was built without a chat repository")
        return self._chat_repo

    async def send(
        self,
        message: str,
        *,
        command: str | None = None,
        user_id: str | None = None,
        conversation_id: str | None = None,
    ) -> ChatReply:
        """Answer one user message; unknown commands use the image prompt."""
        message = _require_message(message)
        cmd = ChatCommand.parse(command)
        history: list[ChatTurn] = []
        current_id: str | None = None

        if user_id:
            if conversation_id:
                conversation = await self.chat_repo.get_conversation(conversation_id, user_id)
                if conversation is None:
                    raise ResourceNotFoundException("conversation", conversation_id)
            else:
                conversation = await self.chat_repo.create_conversation(
                    user_id, conversation_title(message)
                )
            current_id = conversation.id
            history = await self.chat_repo.recent_turns(current_id, self.history_limit)
            await self.chat_repo.add_message(
                current_id, ChatRole.USER.value, message, cmd.value
            )

        turns = [
            ChatTurn(role="system", content=system_prompt_for(cmd)),
            *history,
            ChatTurn(role=ChatRole.USER.value, content=message),
        ]
        raw = await self.client.complete(
            turns, max_tokens=CHAT_MAX_TOKENS, temperature=TEMPERATURE, title="Pixico AI"
        )
        reply = strip_markdown_emphasis(raw) if raw else CHAT_FALLBACK_REPLY

        if current_id:
            await self.chat_repo.add_message(
                current_id, ChatRole.ASSISTANT.value, reply, cmd.value
            )
            await self.chat_repo.touch_conversation(current_id)
        logger.debug("Chat reply (%s) for conversation %s", cmd.value, current_id)
        return ChatReply(response=reply, conversation_id=current_id)

    async def support(self, message: str) -> str:
        message = _require_message(message)
        raw = await self.client.complete(
            [
                ChatTurn(role="system", content=SUPPORT_PROMPT),
                ChatTurn(role=ChatRole.USER.value, content=message),
            ],
            max_tokens=SUPPORT_MAX_TOKENS,
            temperature=TEMPERATURE,
            title="Pixico Support",
        )
        return strip_markdown_emphasis(raw) if raw else SUPPORT_FALLBACK_REPLY

    async def list_conversations(self, user_id: str) -> list[ConversationResult]:
        return await self.chat_repo.list_conversations(user_id)

    async def list_messages(
        self, conversation_id: str, user_id: str
    ) -> list[ChatMessageResult]:
        if await self.chat_repo.get_conversation(conversation_id, user_id) is None:
            raise ResourceNotFoundException("conversation", conversation_id)
        return await self.chat_repo.list_messages(conversation_id)

    async def delete_conversation(self, conversation_id: str, user_id: str) -> None:
        if not await self.chat_repo.delete_conversation(conversation_id, user_id):
            raise ResourceNotFoundException("conversation", conversation_id)
