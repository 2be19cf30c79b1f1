"""Dedicated search results page (server-rendered with Jinja2).

A 4-digit prompt code that matches a published prompt redirects straight to
that prompt; everything else renders the full result profile.
"""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.api.v1.dependencies import get_search_service
from app.application.dtos.search import FULL_LIMITS
from app.application.use_cases.search import SearchService
from app.application.services.settings_service import DEFAULT_SETTINGS

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")

router = APIRouter()


@router.get("/search", response_class=HTMLResponse, include_in_schema=False)
async def search_page(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", max_length=500),
):
    query = q.strip()
    context = {
        "site_name": DEFAULT_SETTINGS["site_name"],
        "query": query,
        "total": 0,
        "prompts": [],
        "articles": [],
    }
    if query:
        outcome = await search_svc.search_text(q, FULL_LIMITS)
        if outcome.redirect_to:
            return RedirectResponse(outcome.redirect_to, status_code=303)
        context.update(
            total=len(outcome.results),
            prompts=outcome.results.prompts,
            articles=outcome.results.articles,
        )
    return templates.TemplateResponse(request, "search.html", context)
