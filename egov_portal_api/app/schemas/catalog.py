"""
Pydantic schemas for the service catalog.

Catalog entries are loaded from ``services.json`` and validated
against these models once at startup.  JSON keys use camelCase, so
the models declare aliases and are dumped ``by_alias``.  Any extra keys
found in the dataset (processing time, required documents and so on)
are kept and returned to clients untouched.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryItem(BaseModel):
    """A group of related services, e.g. civil status or transport."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str
    description: str = ""


class ServiceItem(BaseModel):
    """An administrative procedure citizens can look up."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str
    short_description: str = Field("", alias="shortDescription")
    full_description: Optional[str] = Field(None, alias="fullDescription")
    category_id: str = Field(..., alias="categoryId")
    status: Literal["online", "partial", "offline"] = "online"
    views: int = Field(0, ge=0)
    fee: Optional[str] = None
    agency: Optional[str] = None
    related_services: List[str] = Field(default_factory=list, alias="relatedServices")
