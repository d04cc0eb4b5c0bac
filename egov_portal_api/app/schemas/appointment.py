"""
Pydantic schema for booking an appointment at a service counter.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AppointmentCreate(BaseModel):
    """Schema for booking an appointment.

    ``serviceId``, ``date``, ``time``, ``fullName`` and ``phone`` are
    required; ``location`` defaults to the agency handling the service.
    """

    model_config = ConfigDict(populate_by_name=True)

    service_id: Optional[str] = Field(None, alias="serviceId")
    date: Optional[str] = None
    time: Optional[str] = None
    full_name: Optional[str] = Field(None, alias="fullName")
    phone: Optional[str] = None
    email: Optional[str] = None
    notes: Optional[str] = None
    location: Optional[str] = None
