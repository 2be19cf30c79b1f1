"""UserService and ChatService unit tests with mocked ports."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.chat import ChatTurn, ConversationResult
from app.application.dtos.user import UserResult
from app.application.services.chat_service import (
    CHAT_FALLBACK_REPLY,
    SUPPORT_FALLBACK_REPLY,
    ChatService,
    conversation_title,
)
from app.application.services.user_service import UserService
from app.domain.exceptions import (
    AuthenticationException,
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)


def _user(id: str = "u1", role: str = "user") -> UserResult:
    return UserResult(
        id=id,
        email="ada@example.com",
        full_name="Ada",
        avatar_url=None,
        role=role,
        is_active=True,
    )


# ---- Users ----


async def test_register_normalizes_email() -> None:
    repo = AsyncMock()
    repo.get_by_email = AsyncMock(return_value=None)
    repo.create_user = AsyncMock(return_value=_user())
    await UserService(repo).register(" Ada@Example.COM ", "long-enough", "Ada")
    repo.create_user.assert_awaited_once_with("ada@example.com", "long-enough", "Ada")


async def test_register_rejects_short_password_and_taken_email() -> None:
    repo = AsyncMock()
    with pytest.raises(ValidationException):
        await UserService(repo).register("a@b.co", "short")
    repo.get_by_email = AsyncMock(return_value=_user())
    with pytest.raises(DuplicateResourceException):
        await UserService(repo).register("ada@example.com", "long-enough")


async def test_authenticate_failure_raises() -> None:
    repo = AsyncMock()
    repo.authenticate = AsyncMock(return_value=None)
    with pytest.raises(AuthenticationException):
        await UserService(repo).authenticate("ada@example.com", "wrong")


async def test_admin_cannot_demote_self() -> None:
    repo = AsyncMock()
    with pytest.raises(ValidationException):
        await UserService(repo).set_role("u1", "user", acting_user_id="u1")
    repo.update.assert_not_awaited()


async def test_profile_update_needs_a_field() -> None:
    with pytest.raises(ValidationException):
        await UserService(AsyncMock()).update_profile("u1")


# ---- Chat ----


@pytest.fixture
def chat_client() -> AsyncMock:
    client = AsyncMock()
    client.complete = AsyncMock(return_value="**Try** a wider lens")
    return client


@pytest.fixture
def chat_repo() -> AsyncMock:
    now = datetime(2025, 1, 1, tzinfo=timezone.utc)
    repo = AsyncMock()
    repo.create_conversation = AsyncMock(
        return_value=ConversationResult("c1", "u1", "Hi", now, now)
    )
    repo.recent_turns = AsyncMock(return_value=[ChatTurn("user", "earlier")])
    return repo


async def test_anonymous_chat_is_single_turn(chat_client: AsyncMock) -> None:
    reply = await ChatService(chat_client).send("make it moody")
    assert reply.response == "Try a wider lens"
    assert reply.conversation_id is None
    turns = chat_client.complete.await_args.args[0]
    assert [t.role for t in turns] == ["system", "user"]


async def test_signed_in_chat_persists_and_sends_history(
    chat_client: AsyncMock, chat_repo: AsyncMock
) -> None:
    svc = ChatService(chat_client, chat_repo, history_limit=20)
    reply = await svc.send("make it moody", command="chat", user_id="u1")
    assert reply.conversation_id == "c1"
    chat_repo.recent_turns.assert_awaited_once_with("c1", 20)
    turns = chat_client.complete.await_args.args[0]
    assert [t.content for t in turns[1:]] == ["earlier", "make it moody"]
    assert chat_repo.add_message.await_count == 2
    chat_repo.touch_conversation.assert_awaited_once_with("c1")


async def test_chat_foreign_conversation_is_not_found(
    chat_client: AsyncMock, chat_repo: AsyncMock
) -> None:
    chat_repo.get_conversation = AsyncMock(return_value=None)
    with pytest.raises(ResourceNotFoundException):
        await ChatService(chat_client, chat_repo).send(
            "hi", user_id="u1", conversation_id="someone-elses"
        )
    chat_client.complete.assert_not_awaited()


async def test_empty_model_reply_falls_back(chat_client: AsyncMock) -> None:
    chat_client.complete = AsyncMock(return_value="")
    svc = ChatService(chat_client)
    assert (await svc.send("hi")).response == CHAT_FALLBACK_REPLY
    assert await svc.support("hi") == SUPPORT_FALLBACK_REPLY


async def test_blank_message_is_rejected(chat_client: AsyncMock) -> None:
    with pytest.raises(ValidationException):
        await ChatService(chat_client).send("   ")


def test_conversation_title_is_truncated() -> None:
    assert conversation_title("short") == "short"
    assert conversation_title("x" * 60) == "x" * 50 + "..."


async def test_support_bot_needs_no_repository(chat_client: AsyncMock) -> None:
    svc = ChatService(chat_client)
    assert await svc.support("how do I copy a prompt?") == "Try a wider lens"
    with pytest.raises(RuntimeError):
        await svc.list_conversations("u1")
