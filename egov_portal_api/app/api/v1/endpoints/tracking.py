"""
Application endpoints for API v1.

Citizens submit applications for a service and follow their progress
with the returned code.  ``/tracking/{code}`` and
``/applications/{code}`` read the same registry; they differ only in
the wording of their 404 message.  Codes are matched regardless of
case.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from egov_portal_api.app.api.deps import get_application_service
from egov_portal_api.app.core.responses import ok
from egov_portal_api.app.schemas.tracking import ApplicationCreate
from egov_portal_api.app.services.application_service import ApplicationService

router = APIRouter()


@router.get("/tracking/{code}", response_model=Dict[str, Any], summary="Track an application")
async def track(code: str, applications: ApplicationService = Depends(get_application_service)) -> Dict[str, Any]:
    return ok(await applications.get_tracking(code))


@router.post("/applications", response_model=Dict[str, Any], summary="Submit an application")
async def submit_application(
    data: ApplicationCreate,
    applications: ApplicationService = Depends(get_application_service),
) -> Dict[str, Any]:
    """Submit an application and return its tracking code.

    Returns HTTP 400 if required applicant details are missing and
    HTTP 404 if the service does not exist.
    """
    application = await applications.submit_application(data)
    return ok(
        {"applicationCode": application["code"], "application": application},
        message="Nộp hồ sơ thành công!",
    )


@router.get("/applications/{code}", response_model=Dict[str, Any], summary="Get an application")
async def get_application(
    code: str,
    applications: ApplicationService = Depends(get_application_service),
) -> Dict[str, Any]:
    return ok(await applications.get_application(code))
