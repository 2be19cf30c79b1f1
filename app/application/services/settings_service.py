"""Site-wide settings: stored key/value pairs layered over built-in defaults."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.exceptions import ValidationException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ISettingRepository

DEFAULT_SETTINGS: dict[str, str] = {
    "site_name": "Pixico",
    "site_tagline": "Discover the perfect AI prompts for stunning image and video generation.",
    "default_meta_title": "Pixico - AI Image Prompts Library",
    "default_meta_description": (
        "Discover thousands of curated AI prompts for Midjourney, FLUX, "
        "Stable Diffusion, DALL-E and more."
    ),
    "contact_email": "hello@pixico.com",
    "social_twitter": "https://twitter.com/pixico",
    "social_instagram": "https://instagram.com/pixico",
    "social_discord": "https://discord.gg/pixico",
}


class SiteSettingsService:
    def __init__(self, setting_repo: "ISettingRepository") -> None:
        self.setting_repo = setting_repo

    async def get_settings(self) -> dict[str, str]:
        """Defaults overridden by stored values. Unknown stored keys are ignored."""
        stored = await self.setting_repo.get_all()
        return {key: stored.get(key, default) for key, default in DEFAULT_SETTINGS.items()}

    async def update_settings(self, values: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(values) - set(DEFAULT_SETTINGS))
        if unknown:
            raise ValidationException(
                f"Unknown setting(s): {', '.join(unknown)}", field=unknown[0]
            )
        await self.setting_repo.upsert_many(values)
        return await self.get_settings()

    async def reset(self) -> dict[str, str]:
        await self.setting_repo.delete_all()
        return dict(DEFAULT_SETTINGS)
