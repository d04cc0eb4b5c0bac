"""
Portal-wide search endpoint for API v1.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from egov_portal_api.app.api.deps import get_catalog_service
from egov_portal_api.app.core.responses import ok
from egov_portal_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=Dict[str, Any], summary="Search services and categories")
async def search(
    q: Optional[str] = Query(None, description="At least two characters"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Dict[str, Any]:
    """Search the catalog.

    Queries shorter than two characters yield empty result lists rather
    than an error.
    """
    return ok(await catalog.search(q))
