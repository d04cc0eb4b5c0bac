"""
Contact form endpoint for API v1.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from egov_portal_api.app.api.deps import get_contact_service
from egov_portal_api.app.core.responses import ok
from egov_portal_api.app.schemas.contact import ContactCreate
from egov_portal_api.app.services.contact_service import ContactService

router = APIRouter()


@router.post("", response_model=Dict[str, Any], summary="Send a question")
async def submit_contact(data: ContactCreate, contacts: ContactService = Depends(get_contact_service)) -> Dict[str, Any]:
    """Store a question and return its ``DVC`` ticket id.

    Name, email and message are required and the email must look like
    ``local@domain.tld``; otherwise HTTP 400 is returned.
    """
    contact = await contacts.submit(data)
    return ok(
        {"ticketId": contact["ticketId"]},
        message="Câu hỏi của bạn đã được gửi thành công. Chúng tôi sẽ phản hồi trong vòng 24 giờ.",
    )
