"""
Pydantic schemas for document applications.

Submitting an application creates a tracking record whose code the
citizen later uses on the tracking page.  A record carries the
applicant's details, the chosen delivery and payment methods and an
ordered status history.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


TrackingStatus = Literal["received", "verifying", "processing", "approval", "completed", "pending"]


class ApplicantIn(BaseModel):
    """Applicant details; ``fullName`` and ``phone`` are required."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: Optional[str] = Field(None, alias="fullName")
    phone: Optional[str] = None
    email: Optional[str] = None
    id_number: Optional[str] = Field(None, alias="idNumber")
    address: Optional[str] = None


class ApplicationCreate(BaseModel):
    """Schema for submitting an application for a service."""

    model_config = ConfigDict(populate_by_name=True)

    service_id: Optional[str] = Field(None, alias="serviceId")
    applicant: Optional[ApplicantIn] = None
    documents: Optional[List[Any]] = None
    delivery_method: Optional[str] = Field(None, alias="deliveryMethod")
    payment_method: Optional[str] = Field(None, alias="paymentMethod")


class StatusEntry(BaseModel):
    """One step of a tracking record's status history."""

    status: TrackingStatus
    date: str
    note: str = ""
