"""Pydantic request/response schemas for the API."""

from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.schemas.health import HealthResponse
from app.schemas.search import SearchResponse, SearchResultItemResponse
from app.schemas.user import UserResponse
from app.schemas.websocket import WebSocketStatusResponse

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "RegisterRequest",
    "SearchResponse",
    "SearchResultItemResponse",
    "TokenResponse",
    "UserResponse",
    "WebSocketStatusResponse",
]
