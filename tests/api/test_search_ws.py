"""Search widget WebSocket: state snapshots and navigation commands."""

import pytest
from starlette.testclient import TestClient

from app.api.v1.dependencies import get_search_service
from app.api.websocket import ConnectionManager
from app.application.use_cases.search import SearchService
from app.main import app


@pytest.fixture
def ws_client(search_service: SearchService):
    app.dependency_overrides[get_search_service] = lambda: search_service
    app.state.ws_manager = ConnectionManager()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _receive_until(ws, predicate) -> dict:
    for _ in range(20):
        message = ws.receive_json()
        if predicate(message):
            return message
    raise AssertionError("expected message not received")


def test_connect_sends_idle_state(ws_client: TestClient) -> None:
    with ws_client.websocket_connect("/api/v1/search/ws") as ws:
        assert ws.receive_json() == {"type": "state", "state": "idle"}


def test_typing_streams_results(ws_client: TestClient) -> None:
    with ws_client.websocket_connect("/api/v1/search/ws") as ws:
        ws.receive_json()
        ws.send_json({"type": "input", "value": "neon"})
        assert ws.receive_json() == {"type": "state", "state": "debouncing", "query": "neon"}
        results = _receive_until(ws, lambda m: m.get("state") == "results")
        assert results["open"] is True
        assert (results["prompt_count"], results["article_count"]) == (2, 1)
        assert [r["kind"] for r in results["results"]] == ["prompt", "prompt", "article"]


def test_prompt_code_navigates(ws_client: TestClient) -> None:
    with ws_client.websocket_connect("/api/v1/search/ws") as ws:
        ws.receive_json()
        ws.send_json({"type": "input", "value": "#4521"})
        message = _receive_until(ws, lambda m: m["type"] == "navigate")
        assert message["path"] == "/prompt/neon-city-samurai"
        assert ws.receive_json() == {"type": "state", "state": "idle"}


def test_submit_navigates_to_results_page(ws_client: TestClient) -> None:
    with ws_client.websocket_connect("/api/v1/search/ws") as ws:
        ws.receive_json()
        ws.send_json({"type": "input", "value": "neon city"})
        ws.receive_json()
        ws.send_json({"type": "submit"})
        message = _receive_until(ws, lambda m: m["type"] == "navigate")
        assert message["path"] == "/search?q=neon%20city"


def test_escape_closes_dropdown(ws_client: TestClient) -> None:
    with ws_client.websocket_connect("/api/v1/search/ws") as ws:
        ws.receive_json()
        ws.send_json({"type": "input", "value": "neon"})
        _receive_until(ws, lambda m: m.get("state") == "results")
        ws.send_json({"type": "keydown", "key": "Escape"})
        closed = ws.receive_json()
        assert closed["state"] == "results"
        assert closed["open"] is False


def test_invalid_message_gets_error(ws_client: TestClient) -> None:
    with ws_client.websocket_connect("/api/v1/search/ws") as ws:
        ws.receive_json()
        ws.send_text('{"type": "teleport"}')
        assert ws.receive_json() == {"type": "error", "message": "Invalid message"}
        ws.send_text("not json")
        assert ws.receive_json()["type"] == "error"
