"""WebSocket connection manager for live search sessions."""

from app.api.websocket.manager import ConnectionManager, WebSocketSearchChannel

__all__ = ["ConnectionManager", "WebSocketSearchChannel"]
