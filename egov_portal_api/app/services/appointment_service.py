"""
Business logic for appointments at service counters.

Booking validates the request, resolves the service and stores an
appointment with status ``pending`` under an ``LH<8 digits>`` code.
Appointments cannot be changed or cancelled through the API.
"""

import logging

from egov_portal_api.app.core.clock import now_iso
from egov_portal_api.app.core.errors import NotFoundError
from egov_portal_api.app.core.store import DataStore, Record
from egov_portal_api.app.core.tracking import normalize_code
from egov_portal_api.app.core.validation import require, resolve_service
from egov_portal_api.app.schemas.appointment import AppointmentCreate


logger = logging.getLogger(__name__)

MSG_APPOINTMENT_NOT_FOUND = "Không tìm thấy lịch hẹn với mã này"


class AppointmentService:
    """Service for booking and looking up appointments."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    async def book(self, data: AppointmentCreate) -> Record:
        """Create an appointment and return it.

        Raises
        ------
        ValidationError
            If service, date, time, name or phone is missing.
        NotFoundError
            If the service does not exist.
        """
        require([data.service_id, data.date, data.time, data.full_name, data.phone])
        service = resolve_service(self.store, data.service_id)
        appointment = {
            "id": self.store.appointments.next_id(),
            "code": self.store.appointment_codes.next_code(),
            "serviceId": service["id"],
            "serviceName": service["name"],
            "date": data.date,
            "time": data.time,
            "fullName": data.full_name,
            "phone": data.phone,
            "email": data.email or "",
            "notes": data.notes or "",
            "location": data.location or service.get("agency"),
            "status": "pending",
            "createdAt": now_iso(),
        }
        stored = self.store.appointments.append(appointment)
        logger.info("Appointment %s booked for service %s on %s %s", appointment["code"], service["id"], data.date, data.time)
        return stored

    async def get_appointment(self, code: str) -> Record:
        key = normalize_code(code)
        appointment = self.store.appointments.find(lambda a: a["code"] == key)
        if appointment is None:
            raise NotFoundError(MSG_APPOINTMENT_NOT_FOUND)
        return appointment
