"""
Category endpoints for API v1.

Categories group the services of the catalog.  The list is static for
the lifetime of the process; a category's services are paginated the
same way as the main service listing.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from egov_portal_api.app.api.deps import get_catalog_service
from egov_portal_api.app.core.responses import ok
from egov_portal_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=Dict[str, Any], summary="List categories")
async def list_categories(catalog: CatalogService = Depends(get_catalog_service)) -> Dict[str, Any]:
    return ok(await catalog.list_categories())


@router.get("/{category_id}/services", response_model=Dict[str, Any], summary="List services of a category")
async def category_services(
    category_id: str,
    page: int = Query(1),
    limit: int = Query(10),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Dict[str, Any]:
    """Return the category and one page of its services.

    Returns HTTP 404 if the category does not exist.
    """
    return ok(await catalog.category_services(category_id, page=page, limit=limit))
