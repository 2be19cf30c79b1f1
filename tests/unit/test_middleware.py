"""Raw ASGI middleware: timeout, security headers, request ID."""

import asyncio

from app.middleware import RequestIDMiddleware, SecurityHeadersMiddleware, TimeoutMiddleware
from app.shared.context import get_request_id


def _scope(path: str = "/", headers: list[tuple[bytes, bytes]] | None = None) -> dict:
    return {"type": "http", "method": "GET", "path": path, "headers": headers or []}


async def _receive() -> dict:
    return {"type": "http.request", "body": b"", "more_body": False}


async def _run(app, scope: dict) -> list[dict]:
    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    await app(scope, _receive, send)
    return sent


async def _ok_app(scope, receive, send) -> None:
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b"ok"})


async def test_timeout_answers_504_before_response_starts() -> None:
    async def slow_app(scope, receive, send) -> None:
        await asyncio.sleep(5)

    sent = await _run(TimeoutMiddleware(slow_app, timeout_seconds=0.01), _scope())
    assert sent[0]["status"] == 504
    assert b"GATEWAY_TIMEOUT" in sent[1]["body"]


async def test_timeout_after_start_sends_nothing_more() -> None:
    async def streaming_app(scope, receive, send) -> None:
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await asyncio.sleep(5)

    sent = await _run(TimeoutMiddleware(streaming_app, timeout_seconds=0.01), _scope())
    assert [m["status"] for m in sent] == [200]


async def test_security_headers_added_and_docs_skip_csp() -> None:
    app = SecurityHeadersMiddleware(_ok_app)
    headers = dict((await _run(app, _scope("/search")))[0]["headers"])
    assert b"connect-src 'self' ws: wss:" in headers[b"content-security-policy"]
    assert headers[b"x-frame-options"] == b"DENY"
    docs_headers = dict((await _run(app, _scope("/docs")))[0]["headers"])
    assert b"content-security-policy" not in docs_headers
    assert docs_headers[b"x-content-type-options"] == b"nosniff"


async def test_request_id_is_bound_and_echoed() -> None:
    seen: list[str | None] = []

    async def app(scope, receive, send) -> None:
        seen.append(get_request_id())
        await _ok_app(scope, receive, send)

    sent = await _run(
        RequestIDMiddleware(app), _scope(headers=[(b"x-request-id", b"req-42")])
    )
    assert seen == ["req-42"]
    assert (b"X-Request-ID", b"req-42") in sent[0]["headers"]
    assert get_request_id() is None
