"""Seed a development database with categories, AI models, prompts and articles.

Skips categories and models that already exist (by slug / name) and skips
prompts and articles when any are present, so it is safe to run twice.

Usage:
    uv run python -m scripts.seed_dev_data
Requires: DATABASE_URL (Postgres) and `alembic upgrade head`.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.application.dtos.blog import BlogCreate
from app.application.dtos.prompt import PromptCreate
from app.application.services.blog_service import BlogService
from app.application.services.category_service import CategoryService
from app.application.services.prompt_service import PromptService
from app.domain.enums import ContentStatus
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import (
    AiModelRepository,
    BlogRepository,
    CategoryRepository,
    PromptRepository,
)

CATEGORIES = [
    {"name": "Portraits", "icon": "user", "show_in_header": True, "show_in_showcase": True},
    {"name": "Landscapes", "icon": "mountain", "show_in_header": True, "show_in_featured": True},
    {"name": "Anime", "icon": "sparkles", "show_in_header": True, "show_in_footer": True},
    {"name": "Product Shots", "icon": "box", "show_in_footer": True},
]

AI_MODELS = [("Midjourney", "6"), ("DALL-E", "3"), ("Stable Diffusion", "XL")]

PROMPTS = [
    (
        "Golden Hour Portrait",
        "Portraits",
        "Portrait of a woman in a sunflower field at golden hour, 85mm lens, shallow depth of field",
    ),
    (
        "Misty Mountain Lake",
        "Landscapes",
        "Misty alpine lake at dawn, mirror reflections, soft volumetric light, ultra wide",
    ),
    (
        "Neon City Samurai",
        "Anime",
        "Anime samurai on a rainy neon street, cel shading, dramatic rim light",
    ),
    (
        "Minimal Perfume Bottle",
        "Product Shots",
        "Glass perfume bottle on white marble, studio lighting, soft shadows, product photography",
    ),
]

ARTICLES = [
    (
        "Writing Better Portrait Prompts",
        "<p>Start with the subject, then the light, then the lens.</p>",
    ),
    (
        "Aspect Ratios Explained",
        "<p>Pick the ratio before you tune the details.</p>",
    ),
]


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run() -> None:
    _load_env()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print(
            "AsyncSessionLocal not configured. Set DATABASE_URL and run: uv run alembic upgrade head",
            file=sys.stderr,
        )
        sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            category_repo = CategoryRepository(session)
            model_repo = AiModelRepository(session)
            prompt_repo = PromptRepository(session)
            blog_repo = BlogRepository(session)
            category_svc = CategoryService(category_repo)

            category_ids: dict[str, str] = {}
            for fields in CATEGORIES:
                name = fields["name"]
                existing = {c.name: c for c in await category_repo.list_categories()}
                if name in existing:
                    category_ids[name] = existing[name].id
                    print(f"Category {name} already exists, skip")
                    continue
                extra = {k: v for k, v in fields.items() if k != "name"}
                created = await category_svc.create_category(name, **extra)
                category_ids[name] = created.id
                print(f"Category {name} -> {created.id}")

            models = {m.name: m for m in await model_repo.list_models()}
            for name, version in AI_MODELS:
                if name not in models:
                    models[name] = await model_repo.create(name, version)
                    print(f"AI model {name} {version}")
            default_model = models[AI_MODELS[0][0]]

            if await prompt_repo.count() == 0:
                prompt_svc = PromptService(prompt_repo)
                for title, category, text in PROMPTS:
                    prompt = await prompt_svc.create_prompt(
                        PromptCreate(
                            title=title,
                            prompt_text=text,
                            status=ContentStatus.PUBLISHED.value,
                            category_id=category_ids.get(category),
                            model_id=default_model.id,
                            aspect_ratio="16:9",
                        )
                    )
                    print(f"  Prompt {prompt.prompt_code} {prompt.slug}")
            else:
                print("Prompts already present, skip")

            if await blog_repo.count() == 0:
                blog_svc = BlogService(blog_repo)
                for title, content in ARTICLES:
                    blog = await blog_svc.create_blog(
                        BlogCreate(
                            title=title,
                            content=content,
                            status=ContentStatus.PUBLISHED.value,
                        )
                    )
                    print(f"  Article {blog.slug}")
            else:
                print("Articles already present, skip")

    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(run())
