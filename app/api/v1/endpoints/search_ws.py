"""WebSocket endpoint backing the header search widget.

One SearchSession per connection, registered with the connection manager from
app.state (set in lifespan). The browser streams keystrokes and interaction
events; the session pushes state snapshots and navigation commands back.
"""

import dataclasses
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from app.api.v1.dependencies import AdminUser, get_search_service
from app.api.websocket import WebSocketSearchChannel
from app.application.dtos.search import COMPACT_LIMITS
from app.application.search import DismissalEvent, SearchSession
from app.application.use_cases.search import SearchService
from app.core.config import get_settings
from app.schemas.websocket import (
    FocusMessage,
    InputMessage,
    KeyDownMessage,
    NavigationMessage,
    PointerDownMessage,
    SearchClientMessage,
    SelectMessage,
    SubmitMessage,
    WebSocketStatusResponse,
    search_client_message_adapter,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _build_session(
    search_svc: SearchService, channel: WebSocketSearchChannel
) -> SearchSession:
    settings = get_settings()
    limits = dataclasses.replace(
        COMPACT_LIMITS, min_length=settings.search_compact_min_length
    )
    return SearchSession(
        search_svc,
        channel,
        limits=limits,
        debounce_seconds=settings.search_debounce_ms / 1000,
        listener=channel.publish_state,
    )


async def _dispatch(session: SearchSession, message: SearchClientMessage) -> None:
    match message:
        case InputMessage(value=value):
            await session.on_input(value)
        case SubmitMessage():
            await session.submit()
        case SelectMessage(kind=kind, slug=slug):
            await session.select(kind, slug)
        case FocusMessage():
            await session.focus()
        case KeyDownMessage(key=key):
            await session.dismiss(DismissalEvent.key_down(key))
        case PointerDownMessage(inside=inside):
            await session.dismiss(DismissalEvent.pointer_down(inside))
        case NavigationMessage():
            await session.dismiss(DismissalEvent.navigation())


@router.websocket("/ws")
async def search_websocket(
    websocket: WebSocket,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
):
    """Drive a type-ahead search session over the socket until the client leaves."""
    manager = websocket.app.state.ws_manager
    channel = WebSocketSearchChannel(websocket)
    session = _build_session(search_svc, channel)
    await manager.connect(websocket, session)
    await channel.publish_state(session.state)
    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = search_client_message_adapter.validate_json(data)
            except ValidationError as e:
                logger.debug("Rejected search widget message: %s", e)
                await channel.send_error("Invalid message")
                continue
            await _dispatch(session, message)
    except WebSocketDisconnect:
        pass
    finally:
        await manager.disconnect(websocket)


@router.get("/ws/status", response_model=WebSocketStatusResponse)
async def search_websocket_status(request: Request, _admin: AdminUser):
    """Number of open search sessions (admin only)."""
    count = await request.app.state.ws_manager.get_connection_count()
    return WebSocketStatusResponse(total_connections=count)
