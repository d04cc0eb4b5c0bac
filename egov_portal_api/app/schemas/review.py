"""
Pydantic schemas for service reviews.

Citizens rate a service from 1 to 5 stars and may leave a comment.
Reviews are published immediately (status ``approved``); there is no
moderation step.  ``rating`` is accepted as any JSON value and checked
by ``core.validation.parse_rating`` so that out-of-range and
non-numeric ratings share one error message.  The comment is stored
as sent.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreate(BaseModel):
    """Schema for submitting a review of a service."""

    model_config = ConfigDict(populate_by_name=True)

    rating: Any = Field(None, description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, description="Optional textual comment")
    user_name: Optional[str] = Field(None, alias="userName")
    user_email: Optional[str] = Field(None, alias="userEmail")
