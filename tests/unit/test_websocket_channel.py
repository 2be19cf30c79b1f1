"""Outbound search socket: sends to a peer that vanished are dropped."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import WebSocketDisconnect
from starlette.websockets import WebSocketState

from app.api.websocket import WebSocketSearchChannel
from app.application.search import Idle


def _socket(error: Exception | None = None) -> MagicMock:
    websocket = MagicMock()
    websocket.application_state = WebSocketState.CONNECTED
    websocket.send_json = AsyncMock(side_effect=error)
    return websocket


async def test_state_and_navigation_are_sent_as_json() -> None:
    websocket = _socket()
    channel = WebSocketSearchChannel(websocket)
    await channel.publish_state(Idle())
    await channel.navigate("/prompt/neon-city-samurai")
    sent = [call.args[0] for call in websocket.send_json.await_args_list]
    assert sent[0]["type"] == "state"
    assert sent[1] == {"type": "navigate", "path": "/prompt/neon-city-samurai"}


@pytest.mark.parametrize(
    "error",
    [
        WebSocketDisconnect(code=1006),
        RuntimeError("Cannot call send once a close message has been sent"),
    ],
)
async def test_send_to_departed_peer_does_not_raise(error: Exception) -> None:
    websocket = _socket(error)
    channel = WebSocketSearchChannel(websocket)
    await channel.publish_state(Idle())
    await channel.navigate("/search?q=neon")
    await channel.send_error("Invalid message")
    assert websocket.send_json.await_count == 3


async def test_nothing_is_sent_once_the_app_side_closed() -> None:
    websocket = _socket()
    websocket.application_state = WebSocketState.DISCONNECTED
    await WebSocketSearchChannel(websocket).publish_state(Idle())
    websocket.send_json.assert_not_awaited()
