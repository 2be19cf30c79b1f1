"""Application use cases: one entry point per workflow."""

from app.application.use_cases.admin_stats import GetDashboardStatsUseCase
from app.application.use_cases.search import SearchService
from app.application.use_cases.uploads import ImageUploadService

__all__ = [
    "GetDashboardStatsUseCase",
    "ImageUploadService",
    "SearchService",
]
