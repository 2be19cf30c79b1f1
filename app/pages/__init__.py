"""Server-rendered HTML pages (landing page and search results)."""

from app.pages.root import render_root_page
from app.pages.search import router as pages_router

__all__ = ["pages_router", "render_root_page"]
