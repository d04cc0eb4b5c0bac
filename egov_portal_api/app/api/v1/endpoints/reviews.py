"""
API endpoints for service reviews.

These endpoints let citizens rate a service from 1 to 5 stars and list
the published reviews of a service with rating statistics.  The router
defines full paths under ``/services`` itself and is included without
a prefix.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from egov_portal_api.app.api.deps import get_review_service
from egov_portal_api.app.core.responses import ok
from egov_portal_api.app.schemas.review import ReviewCreate
from egov_portal_api.app.services.review_service import ReviewService

router = APIRouter()


@router.post("/services/{service_id}/reviews", response_model=Dict[str, Any], summary="Submit a review")
async def create_review(
    service_id: str,
    data: ReviewCreate,
    reviews: ReviewService = Depends(get_review_service),
) -> Dict[str, Any]:
    """Create a review for a service.

    Returns HTTP 400 when the rating is missing or outside 1..5 and
    HTTP 404 when the service does not exist.
    """
    review = await reviews.create_review(service_id, data)
    return ok(review, message="Cảm ơn bạn đã đánh giá dịch vụ!")


@router.get("/services/{service_id}/reviews", response_model=Dict[str, Any], summary="List reviews of a service")
async def list_reviews(
    service_id: str,
    page: int = Query(1),
    limit: int = Query(10),
    reviews: ReviewService = Depends(get_review_service),
) -> Dict[str, Any]:
    return ok(await reviews.list_reviews(service_id, page=page, limit=limit))
