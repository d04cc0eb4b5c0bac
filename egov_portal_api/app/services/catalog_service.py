"""
Service layer for the service catalog.

This module answers every read-only question about the catalog:
listing categories, filtering, searching and paginating services,
ranking popular services and assembling the detail view of a single
service.  Fetching a detail view counts as a visit and increments the
service's ``views`` counter inside the store's lock.

All listings keep the catalog's original order except the popular
list, which is ordered by views.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from egov_portal_api.app.core import query
from egov_portal_api.app.core.errors import NotFoundError
from egov_portal_api.app.core.store import DataStore, Record


logger = logging.getLogger(__name__)

MSG_SERVICE_NOT_FOUND = "Không tìm thấy dịch vụ"
MSG_CATEGORY_NOT_FOUND = "Không tìm thấy danh mục"

SERVICE_LIST_FIELDS = ("name", "shortDescription")
SERVICE_SEARCH_FIELDS = ("name", "shortDescription", "fullDescription")
CATEGORY_SEARCH_FIELDS = ("name", "description")
MIN_QUERY_LENGTH = 2
SEARCH_SERVICE_LIMIT = 5
SEARCH_CATEGORY_LIMIT = 3


class CatalogService:
    """Read access to categories and services."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    async def list_categories(self) -> List[Record]:
        return [dict(c) for c in self.store.categories]

    async def list_services(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        status: Optional[str] = None,
        page: int = query.DEFAULT_PAGE,
        limit: int = query.DEFAULT_LIMIT,
    ) -> query.Page:
        """Return one page of services matching the given filters.

        ``category`` and ``status`` must match exactly; ``search`` is a
        case-insensitive substring of the name or short description.
        """
        services = query.filter_equal(self.store.list_services(), categoryId=category, status=status)
        if search:
            services = query.search(services, search, SERVICE_LIST_FIELDS)
        return query.paginate(services, page, limit)

    async def popular_services(self, limit: int = 6) -> List[Record]:
        """Return the ``limit`` most viewed services."""
        return query.sort_by_views(self.store.list_services())[:limit]

    async def get_service_detail(self, service_id: str) -> Dict[str, Any]:
        """Return a service with its category and related services.

        The call counts as a visit: the stored ``views`` counter is
        incremented by one before the service is returned.

        Raises
        ------
        NotFoundError
            If ``service_id`` does not exist.
        """
        service = self.store.increment_views(service_id)
        if service is None:
            raise NotFoundError(MSG_SERVICE_NOT_FOUND)
        related = []
        for related_id in service.get("relatedServices") or []:
            related_service = self.store.get_service(related_id)
            if related_service is not None:
                related.append(related_service)
        service["category"] = self.store.get_category(service.get("categoryId"))
        service["relatedServices"] = related
        return service

    async def category_services(
        self,
        category_id: str,
        page: int = query.DEFAULT_PAGE,
        limit: int = query.DEFAULT_LIMIT,
    ) -> Dict[str, Any]:
        """Return a category together with one page of its services."""
        category = self.store.get_category(category_id)
        if category is None:
            raise NotFoundError(MSG_CATEGORY_NOT_FOUND)
        services = query.filter_equal(self.store.list_services(), categoryId=category_id)
        result = query.paginate(services, page, limit)
        return {"category": category, "services": result.items, "pagination": result.meta()}

    async def search(self, q: Optional[str]) -> Dict[str, List[Record]]:
        """Search services and categories for the portal's search box.

        Queries shorter than two characters return empty lists.  At most
        five services and three categories are returned.
        """
        if not q or len(q) < MIN_QUERY_LENGTH:
            return {"services": [], "categories": []}
        services = query.search(self.store.list_services(), q, SERVICE_SEARCH_FIELDS)
        categories = query.search(self.store.categories, q, CATEGORY_SEARCH_FIELDS)
        logger.debug("Search %r matched %d services, %d categories", q, len(services), len(categories))
        return {
            "services": services[:SEARCH_SERVICE_LIMIT],
            "categories": [dict(c) for c in categories[:SEARCH_CATEGORY_LIMIT]],
        }
