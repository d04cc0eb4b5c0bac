"""
News, statistics and health endpoints for API v1.

These routes are mounted at the root of the API (``/news``,
``/statistics``, ``/health``) and serve data loaded at startup.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from egov_portal_api.app.api.deps import get_content_service
from egov_portal_api.app.core.clock import now_iso
from egov_portal_api.app.core.responses import ok
from egov_portal_api.app.services.content_service import ContentService

router = APIRouter()


@router.get("/news", response_model=Dict[str, Any], summary="Portal news")
async def news(
    limit: int = Query(5, ge=1, le=100),
    content: ContentService = Depends(get_content_service),
) -> Dict[str, Any]:
    return ok(await content.news(limit))


@router.get("/statistics", response_model=Dict[str, Any], summary="Portal statistics")
async def statistics(content: ContentService = Depends(get_content_service)) -> Dict[str, Any]:
    return ok(await content.statistics())


@router.get("/health", response_model=Dict[str, Any], summary="Health check")
async def health() -> Dict[str, Any]:
    return ok(message="API is running", timestamp=now_iso())
