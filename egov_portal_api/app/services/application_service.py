"""
Business logic for document applications and status tracking.

Submitting an application validates the applicant, resolves the
service, issues an ``HS<year><6 digits>`` code and registers a
tracking record with status ``received``.  The record is stored both
in the applications collection and in the tracking registry, where it
sits next to the demo records seeded at startup.

Tracking records are not advanced after creation; the status history
holds a single ``received`` entry until an operator workflow exists.
"""

import logging
from typing import Any, Dict

from egov_portal_api.app.core.clock import now_iso, today_iso
from egov_portal_api.app.core.errors import NotFoundError
from egov_portal_api.app.core.store import DataStore, Record
from egov_portal_api.app.core.validation import require, resolve_service
from egov_portal_api.app.schemas.tracking import ApplicationCreate, StatusEntry


logger = logging.getLogger(__name__)

MSG_APPLICATION_NOT_FOUND = "Không tìm thấy hồ sơ với mã này"
NOTE_RECEIVED = "Hồ sơ đã được tiếp nhận"
PROCESSING_DAYS = 7


class ApplicationService:
    """Service for submitting applications and looking up their status."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    async def submit_application(self, data: ApplicationCreate) -> Record:
        """Create a tracking record for a new application.

        Raises
        ------
        ValidationError
            If the service id, applicant name or phone is missing.
        NotFoundError
            If the service does not exist.
        DuplicateCodeError
            If no free application code could be issued.
        """
        applicant = data.applicant
        require([data.service_id, applicant and applicant.full_name, applicant and applicant.phone])
        service = resolve_service(self.store, data.service_id)

        code = self.store.application_codes.next_code()
        created_at = now_iso()
        record: Dict[str, Any] = {
            "id": self.store.applications.next_id(),
            "code": code,
            "serviceId": service["id"],
            "serviceName": service["name"],
            "applicant": {
                "fullName": applicant.full_name,
                "phone": applicant.phone,
                "email": applicant.email or "",
                "idNumber": applicant.id_number or "",
                "address": applicant.address or "",
            },
            "documents": data.documents or [],
            "deliveryMethod": data.delivery_method or "pickup",
            "paymentMethod": data.payment_method or "cash",
            "fee": service.get("fee"),
            "agency": service.get("agency"),
            "submitDate": today_iso(),
            "status": "received",
            "statusHistory": [StatusEntry(status="received", date=created_at, note=NOTE_RECEIVED).model_dump()],
            "estimatedCompletion": today_iso(PROCESSING_DAYS),
            "createdAt": created_at,
        }
        self.store.tracking.put(code, record)
        self.store.applications.append(record)
        logger.info("Application %s submitted for service %s", code, service["id"])
        return self.store.tracking.get(code)

    async def get_tracking(self, code: str) -> Record:
        """Return the tracking record for ``code`` (demo or submitted)."""
        return self.store.tracking.get(code)

    async def get_application(self, code: str) -> Record:
        """Same lookup as ``get_tracking`` with the application page's message."""
        try:
            return self.store.tracking.get(code)
        except NotFoundError:
            raise NotFoundError(MSG_APPLICATION_NOT_FOUND)
