"""
Business logic for service reviews.

Citizens rate a service from 1 to 5 stars.  Reviews are published
immediately with status ``approved`` and listed per service together
with summary statistics: the number of reviews, the average rating
rounded to one decimal and the count of each star value.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict

from egov_portal_api.app.core import query
from egov_portal_api.app.core.clock import now_iso
from egov_portal_api.app.core.store import DataStore, Record
from egov_portal_api.app.core.validation import parse_rating, resolve_service
from egov_portal_api.app.schemas.review import ReviewCreate


logger = logging.getLogger(__name__)

ANONYMOUS_NAME = "Ẩn danh"


def _average(reviews) -> float:
    """Mean rating to one decimal, halves rounded up (4.25 -> 4.3)."""
    mean = Decimal(sum(r["rating"] for r in reviews)) / Decimal(len(reviews))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class ReviewService:
    """Service for submitting and listing reviews of a service."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    async def create_review(self, service_id: str, data: ReviewCreate) -> Record:
        """Store a review for ``service_id`` and return it.

        The rating is checked before the service is resolved, so an
        invalid rating is reported even for an unknown service.
        """
        rating = parse_rating(data.rating)
        resolve_service(self.store, service_id)
        review = {
            "id": self.store.reviews.next_id(),
            "serviceId": service_id,
            "rating": rating,
            "comment": data.comment or "",
            "userName": data.user_name or ANONYMOUS_NAME,
            "userEmail": data.user_email or "",
            "createdAt": now_iso(),
            "status": "approved",
        }
        stored = self.store.reviews.append(review)
        logger.info("Review %s (%d stars) added to service %s", review["id"], rating, service_id)
        return stored

    async def list_reviews(
        self,
        service_id: str,
        page: int = query.DEFAULT_PAGE,
        limit: int = query.DEFAULT_LIMIT,
    ) -> Dict[str, Any]:
        """Return one page of approved reviews plus rating statistics."""
        reviews = self.store.reviews.filter(
            lambda r: r["serviceId"] == service_id and r["status"] == "approved"
        )
        result = query.paginate(reviews, page, limit)
        total = len(reviews)
        average = _average(reviews) if total else 0
        distribution = {str(star): sum(1 for r in reviews if r["rating"] == star) for star in range(5, 0, -1)}
        return {
            "reviews": result.items,
            "stats": {"total": total, "average": average, "distribution": distribution},
            "pagination": result.meta(),
        }
