"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers (catalog, tracking,
reviews, elections, etc.) under a unified prefix.  When new endpoints
are added or when new domains are introduced, update this file to
include their routers.
"""

from fastapi import APIRouter

from .endpoints import (
    appointments,
    categories,
    contact,
    content,
    elections,
    reviews,
    search,
    services,
    tracking,
)

# Create a router for version 1 and include sub-routers for each domain.
router = APIRouter()

router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(services.router, prefix="/services", tags=["services"])
# The reviews router defines its own "/services/{service_id}/reviews" paths.
router.include_router(reviews.router, tags=["reviews"])
router.include_router(search.router, prefix="/search", tags=["search"])
# Tracking and application routes share one registry and live in one module.
router.include_router(tracking.router, tags=["applications"])
router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(elections.router, prefix="/elections", tags=["elections"])
router.include_router(content.router, tags=["content"])
