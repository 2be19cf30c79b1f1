"""OpenRouter chat completions client (OpenAI-compatible /chat/completions).

Uses a shared httpx.AsyncClient created in the application lifespan.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from app.domain.exceptions import ServiceNotConfiguredException, UpstreamServiceException

if TYPE_CHECKING:
    from app.application.dtos.chat import ChatTurn

logger = logging.getLogger(__name__)

SERVICE_NAME = "openrouter"


class OpenRouterClient:
    """Implements IChatCompletionClient against OpenRouter."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        api_key: str | None,
        model: str,
        base_url: str = "https://openrouter.ai/api/v1",
        referer: str | None = None,
        timeout: float = 60.0,
    ) -> None:
        self._http = http_client
        self._api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.referer = referer
        self.timeout = timeout

    def _headers(self, title: str | None) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        if self.referer:
            headers["HTTP-Referer"] = self.referer
        if title:
            headers["X-Title"] = title
        return headers

    async def complete(
        self,
        messages: list[ChatTurn],
        *,
        max_tokens: int,
        temperature: float = 0.7,
        title: str | None = None,
    ) -> str:
        """Return the first choice's message content ('' when the API sends none).

        Raises:
            ServiceNotConfiguredException: OPENROUTER_API_KEY is not set.
            UpstreamServiceException: Transport error or non-2xx response.
        """
        if not self._api_key:
            raise ServiceNotConfiguredException(SERVICE_NAME, "AI assistant is not configured")
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        try:
            response = await self._http.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers=self._headers(title),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.warning("OpenRouter request failed: %s", e)
            raise UpstreamServiceException(SERVICE_NAME, str(e) or type(e).__name__) from e

        if response.is_error:
            reason = _error_message(response)
            logger.warning("OpenRouter API error %s: %s", response.status_code, reason)
            raise UpstreamServiceException(SERVICE_NAME, reason, response.status_code)

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            logger.warning("OpenRouter response had no message content")
            return ""
        return content or ""


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return f"HTTP {response.status_code}"
