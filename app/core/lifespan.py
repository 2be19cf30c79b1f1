"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring (shared HTTP client, WebSocket
manager, DB engine dispose). No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: shared HTTP client for the LLM API, WebSocket manager.
    Shutdown: search sessions closed, HTTP client closed, SQL engine disposed.
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for outbound API calls (connection reuse).
    app.state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.openrouter_timeout_seconds, connect=10.0)
    )

    from app.api.websocket import ConnectionManager

    app.state.ws_manager = ConnectionManager()
    if not settings.openrouter_api_key:
        logger.info("OPENROUTER_API_KEY not set; chat endpoints will return 503")

    yield

    # ---- Shutdown ----
    await app.state.ws_manager.close_all()

    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    from app.infrastructure.persistence import database

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
