"""
Pydantic schemas for the election section of the portal.

The election pages let citizens subscribe to notifications, check
whether they are on the voter list and report problems.  Voter data
is demo data only.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionCreate(BaseModel):
    """Subscription to election notifications (email or phone required)."""

    email: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    province: Optional[str] = None
    district: Optional[str] = None
    ward: Optional[str] = None


class VoterCheck(BaseModel):
    """Voter list lookup by citizen ID, full name and birth year."""

    model_config = ConfigDict(populate_by_name=True)

    id_number: Optional[str] = Field(None, alias="idNumber")
    full_name: Optional[str] = Field(None, alias="fullName")
    birth_year: Any = Field(None, alias="birthYear")


class FeedbackCreate(BaseModel):
    """A voter's report about the election process."""

    model_config = ConfigDict(populate_by_name=True)

    type: Optional[str] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    contact_email: Optional[str] = Field(None, alias="contactEmail")
    contact_phone: Optional[str] = Field(None, alias="contactPhone")
    anonymous: bool = False
