"""Request-scoped context using contextvars.

The request ID middleware stores the current request ID here so log records
emitted anywhere during the request can carry it.
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def set_request_id(request_id: str | None) -> Token:
    """Bind request_id to the current task. Returns a token for reset_request_id()."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    return _current_request_id.get()
