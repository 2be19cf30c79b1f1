"""Admin dashboard API schemas (stats, site settings, uploads)."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DashboardStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    prompts: int
    published_prompts: int
    blogs: int
    categories: int
    users: int
    new_contacts: int


class SiteSettingsResponse(BaseModel):
    settings: dict[str, str]


class SiteSettingsUpdateRequest(BaseModel):
    """Keys to change; unknown keys are rejected."""

    settings: dict[str, str] = Field(..., min_length=1)


class UploadResponse(BaseModel):
    url: str
    bucket: Literal["prompt-images", "blog-images"]
