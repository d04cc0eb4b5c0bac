"""
Service catalog endpoints for API v1.

These routes list, filter and paginate the administrative services
offered by the portal, rank the most visited ones and return the
detail view of a single service.  They are publicly accessible.

``/services/popular`` is declared before ``/services/{service_id}`` so
that ``popular`` is not captured as a service id.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from egov_portal_api.app.api.deps import get_catalog_service
from egov_portal_api.app.core.responses import ok
from egov_portal_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=Dict[str, Any], summary="List services")
async def list_services(
    category: Optional[str] = Query(None, description="Category id to filter by"),
    search: Optional[str] = Query(None, description="Text to look for in name or short description"),
    status: Optional[str] = Query(None, description="'online', 'partial' or 'offline'"),
    page: int = Query(1),
    limit: int = Query(10),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Dict[str, Any]:
    """Return a filtered, paginated list of services.

    ``page`` and ``limit`` must be at least 1; other values are
    rejected with HTTP 400.
    """
    result = await catalog.list_services(category=category, search=search, status=status, page=page, limit=limit)
    return ok(result.items, page=result)


@router.get("/popular", response_model=Dict[str, Any], summary="Most viewed services")
async def popular_services(
    limit: int = Query(6, ge=1, le=100),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Dict[str, Any]:
    return ok(await catalog.popular_services(limit))


@router.get("/{service_id}", response_model=Dict[str, Any], summary="Get a service")
async def get_service(service_id: str, catalog: CatalogService = Depends(get_catalog_service)) -> Dict[str, Any]:
    """Return a service with its category and related services.

    Each call increments the service's view counter.  Returns HTTP 404
    if the service does not exist.
    """
    return ok(await catalog.get_service_detail(service_id))
