"""Adapters for third-party services (object storage, LLM API)."""
