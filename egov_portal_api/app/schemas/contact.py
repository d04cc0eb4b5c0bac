"""
Pydantic schema for the contact form.

All fields are optional at the parsing stage; the required ones are
checked by ``core.validation.validate_contact`` so the client gets a
specific message instead of a generic schema error.
"""

from typing import Optional

from pydantic import BaseModel


class ContactCreate(BaseModel):
    """Question sent through the portal's contact form."""

    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    phone: Optional[str] = None
