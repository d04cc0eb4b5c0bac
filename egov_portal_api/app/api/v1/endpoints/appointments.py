"""
Appointment endpoints for API v1.

Citizens book a time slot at the agency handling a service and can
look the appointment up later by its ``LH`` code.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from egov_portal_api.app.api.deps import get_appointment_service
from egov_portal_api.app.core.responses import ok
from egov_portal_api.app.schemas.appointment import AppointmentCreate
from egov_portal_api.app.services.appointment_service import AppointmentService

router = APIRouter()


@router.post("", response_model=Dict[str, Any], summary="Book an appointment")
async def book_appointment(
    data: AppointmentCreate,
    appointments: AppointmentService = Depends(get_appointment_service),
) -> Dict[str, Any]:
    appointment = await appointments.book(data)
    return ok(
        {"appointmentCode": appointment["code"], "appointment": appointment},
        message="Đặt lịch hẹn thành công! Vui lòng chờ xác nhận.",
    )


@router.get("/{code}", response_model=Dict[str, Any], summary="Get an appointment")
async def get_appointment(
    code: str,
    appointments: AppointmentService = Depends(get_appointment_service),
) -> Dict[str, Any]:
    """Return an appointment by code, or HTTP 404."""
    return ok(await appointments.get_appointment(code))
