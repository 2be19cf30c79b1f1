"""DTOs for AI model reference data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AiModelResult:
    """AI model read-model (e.g. Midjourney v6, FLUX)."""

    id: str
    name: str
    version: str | None
