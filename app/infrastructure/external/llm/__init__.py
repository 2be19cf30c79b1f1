"""LLM chat completion adapters."""

from app.infrastructure.external.llm.openrouter_client import OpenRouterClient

__all__ = ["OpenRouterClient"]
