"""WebSocket connection manager for live search widgets.

Each connected widget owns one SearchSession. The manager tracks them so
disconnects and application shutdown tear the sessions down (pending
debounce timers and in-flight searches are cancelled).
Use via app.state.ws_manager (set in lifespan).
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

if TYPE_CHECKING:
    from app.application.search import SearchSession, SearchState

logger = logging.getLogger(__name__)


class WebSocketSearchChannel:
    """Outbound half of a search widget connection.

    Acts as the session's Navigator and state listener: every state change
    becomes {"type": "state", ...} and every route change
    {"type": "navigate", "path": ...}.
    """

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket
        # Debounce and fetch tasks send alongside the receive loop.
        self._send_lock = asyncio.Lock()

    async def _send(self, message: dict[str, Any]) -> None:
        async with self._send_lock:
            if self.websocket.application_state != WebSocketState.CONNECTED:
                return
            try:
                await self.websocket.send_json(message)
            except (WebSocketDisconnect, RuntimeError) as e:
                # Peer gone before the receive loop noticed; the loop cleans up.
                logger.debug(
                    "Dropped %s message for closed search socket: %s", message.get("type"), e
                )

    async def send_error(self, message: str) -> None:
        await self._send({"type": "error", "message": message})

    async def publish_state(self, state: SearchState) -> None:
        await self._send({"type": "state", **state.to_dict()})

    async def navigate(self, path: str) -> None:
        await self._send({"type": "navigate", "path": path})


class ConnectionManager:
    """Tracks open search connections and their sessions (lock-protected)."""

    def __init__(self) -> None:
        self._sessions: dict[WebSocket, SearchSession] = {}
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket, session: SearchSession) -> None:
        """Accept and register a connection with its session."""
        await websocket.accept()
        async with self._lock:
            self._sessions[websocket] = session

    async def disconnect(self, websocket: WebSocket) -> None:
        """Forget the connection and close its session."""
        async with self._lock:
            session = self._sessions.pop(websocket, None)
        if session is not None:
            await session.close()

    async def close_all(self) -> None:
        """Close every session (application shutdown)."""
        async with self._lock:
            items = list(self._sessions.items())
            self._sessions.clear()
        for websocket, session in items:
            await session.close()
            if websocket.application_state == WebSocketState.CONNECTED:
                try:
                    await websocket.close(code=1001)
                except RuntimeError:
                    logger.debug("WebSocket already closed during shutdown")
        if items:
            logger.info("Closed %d search session(s)", len(items))

    async def get_connection_count(self) -> int:
        async with self._lock:
            return len(self._sessions)
