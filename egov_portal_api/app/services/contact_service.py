"""
Business logic for the contact form.

A valid question is stored with status ``pending`` and answered with a
``DVC<number>`` ticket id the citizen can quote in later
correspondence.
"""

import logging

from egov_portal_api.app.core.clock import now_iso
from egov_portal_api.app.core.store import DataStore, Record
from egov_portal_api.app.core.validation import validate_contact
from egov_portal_api.app.schemas.contact import ContactCreate


logger = logging.getLogger(__name__)


class ContactService:
    """Service for storing contact form submissions."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    async def submit(self, data: ContactCreate) -> Record:
        """Validate and store a question.  Returns the stored record."""
        validate_contact(data.name, data.email, data.message)
        contact = {
            "id": self.store.contacts.next_id(),
            "ticketId": self.store.contact_codes.next_code(),
            "name": data.name,
            "email": data.email,
            "phone": data.phone or "",
            "message": data.message,
            "createdAt": now_iso(),
            "status": "pending",
        }
        stored = self.store.contacts.append(contact)
        logger.info("Contact ticket %s created", contact["ticketId"])
        return stored
