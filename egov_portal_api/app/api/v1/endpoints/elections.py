"""
Election endpoints for API v1.

The election section of the portal publishes information about the
upcoming National Assembly election: news, candidates, polling
stations, FAQ, calendar and statistics.  Citizens can subscribe to
notifications, check the (demo) voter list and report problems.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from egov_portal_api.app.api.deps import get_election_service
from egov_portal_api.app.core.responses import ok
from egov_portal_api.app.schemas.election import FeedbackCreate, SubscriptionCreate, VoterCheck
from egov_portal_api.app.services.election_service import ElectionService

router = APIRouter()


@router.get("", response_model=Dict[str, Any], summary="Election overview")
async def overview(elections: ElectionService = Depends(get_election_service)) -> Dict[str, Any]:
    return ok(await elections.overview())


@router.post("/subscribe", response_model=Dict[str, Any], summary="Subscribe to election notifications")
async def subscribe(
    data: SubscriptionCreate,
    elections: ElectionService = Depends(get_election_service),
) -> Dict[str, Any]:
    """Register an email or phone number for notifications.

    Returns HTTP 400 when both are missing or either is already
    registered.
    """
    subscription = await elections.subscribe(data)
    return ok(
        {"subscriptionId": subscription["code"]},
        message="Đăng ký thành công! Bạn sẽ nhận được thông báo về cuộc bầu cử.",
    )


@router.post("/check-voter", response_model=Dict[str, Any], summary="Check voter registration")
async def check_voter(data: VoterCheck, elections: ElectionService = Depends(get_election_service)) -> Dict[str, Any]:
    return ok(await elections.check_voter(data))


@router.get("/polling-stations", response_model=Dict[str, Any], summary="Find polling stations")
async def polling_stations(
    province: Optional[str] = Query(None),
    district: Optional[str] = Query(None),
    ward: Optional[str] = Query(None),
    elections: ElectionService = Depends(get_election_service),
) -> Dict[str, Any]:
    """Return polling stations whose location contains the given parts.

    Matching is a case-insensitive substring match on each of province,
    district and ward.
    """
    stations = await elections.polling_stations(province=province, district=district, ward=ward)
    return ok(stations, total=len(stations))


@router.get("/news", response_model=Dict[str, Any], summary="Election news")
async def news(
    limit: int = Query(10, ge=1, le=100),
    elections: ElectionService = Depends(get_election_service),
) -> Dict[str, Any]:
    return ok(await elections.news(limit))


@router.get("/candidates", response_model=Dict[str, Any], summary="Candidates")
async def candidates(
    constituency: Optional[str] = Query(None),
    position: Optional[str] = Query(None),
    elections: ElectionService = Depends(get_election_service),
) -> Dict[str, Any]:
    return ok(await elections.candidates(constituency=constituency, position=position))


@router.get("/statistics", response_model=Dict[str, Any], summary="Election statistics")
async def statistics(elections: ElectionService = Depends(get_election_service)) -> Dict[str, Any]:
    return ok(await elections.statistics())


@router.get("/faq", response_model=Dict[str, Any], summary="Election FAQ")
async def faq(
    category: Optional[str] = Query(None),
    elections: ElectionService = Depends(get_election_service),
) -> Dict[str, Any]:
    # The category list is sent along so the page can build its filter tabs.
    return ok(await elections.faq(category), categories=await elections.faq_categories())


@router.get("/calendar", response_model=Dict[str, Any], summary="Election calendar")
async def calendar(elections: ElectionService = Depends(get_election_service)) -> Dict[str, Any]:
    return ok(await elections.calendar())


@router.post("/feedback", response_model=Dict[str, Any], summary="Report an election issue")
async def feedback(data: FeedbackCreate, elections: ElectionService = Depends(get_election_service)) -> Dict[str, Any]:
    report = await elections.submit_feedback(data)
    return ok(
        {"ticketCode": report["ticketCode"], "status": report["status"]},
        message="Phản ánh của bạn đã được tiếp nhận. Chúng tôi sẽ xem xét và phản hồi sớm nhất.",
    )


@router.get("/results", response_model=Dict[str, Any], summary="Live results")
async def results(elections: ElectionService = Depends(get_election_service)) -> Dict[str, Any]:
    return ok(await elections.results())
