"""WebSocket API schemas (search widget channel).

Inbound messages are a discriminated union on "type"; outbound messages are
{"type": "state", ...} snapshots and {"type": "navigate", "path": ...}.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from app.domain.enums import ResultKind


class InputMessage(BaseModel):
    """Full current value of the search box after a keystroke."""

    type: Literal["input"]
    value: str = Field("", max_length=500)


class SubmitMessage(BaseModel):
    """Enter pressed (or submit button): go to the full results page."""

    type: Literal["submit"]


class SelectMessage(BaseModel):
    """A dropdown entry was clicked."""

    type: Literal["select"]
    kind: ResultKind
    slug: str = Field(..., min_length=1, max_length=255)


class FocusMessage(BaseModel):
    type: Literal["focus"]


class KeyDownMessage(BaseModel):
    type: Literal["keydown"]
    key: str


class PointerDownMessage(BaseModel):
    """Pointer pressed; inside tells whether it landed in the search container."""

    type: Literal["pointerdown"]
    inside: bool = False


class NavigationMessage(BaseModel):
    """Client-side route change."""

    type: Literal["navigation"]


SearchClientMessage = Annotated[
    InputMessage
    | SubmitMessage
    | SelectMessage
    | FocusMessage
    | KeyDownMessage
    | PointerDownMessage
    | NavigationMessage,
    Field(discriminator="type"),
]

search_client_message_adapter: TypeAdapter[SearchClientMessage] = TypeAdapter(
    SearchClientMessage
)


class WebSocketStatusResponse(BaseModel):
    """Response for GET /search/ws/status (connection count)."""

    total_connections: int = Field(..., description="Number of active search sessions")
