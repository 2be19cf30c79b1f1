"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    admin,
    admin_content,
    auth,
    blogs,
    categories,
    chat,
    contact,
    health,
    prompts,
    search,
    search_ws,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(search_ws.router, prefix="/search", tags=["websocket"])
api_router.include_router(prompts.router, prefix="/prompts", tags=["prompts"])
api_router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
api_router.include_router(categories.router, tags=["catalogue"])
api_router.include_router(contact.router, prefix="/contact", tags=["contact"])
api_router.include_router(chat.router, tags=["assistant"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(admin_content.router, prefix="/admin", tags=["admin"])
