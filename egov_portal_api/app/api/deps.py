"""
FastAPI dependencies wiring services to the application's store.

Each provider builds a service around the ``DataStore`` attached to
``app.state`` by ``create_app``.  Tests override nothing: they simply
create an app with their own store.
"""

from fastapi import Depends

from egov_portal_api.app.core.config import settings
from egov_portal_api.app.core.store import DataStore, get_store
from egov_portal_api.app.services.application_service import ApplicationService
from egov_portal_api.app.services.appointment_service import AppointmentService
from egov_portal_api.app.services.catalog_service import CatalogService
from egov_portal_api.app.services.contact_service import ContactService
from egov_portal_api.app.services.content_service import ContentService
from egov_portal_api.app.services.election_service import ElectionService
from egov_portal_api.app.services.review_service import ReviewService


def get_catalog_service(store: DataStore = Depends(get_store)) -> CatalogService:
    return CatalogService(store)


def get_application_service(store: DataStore = Depends(get_store)) -> ApplicationService:
    return ApplicationService(store)


def get_appointment_service(store: DataStore = Depends(get_store)) -> AppointmentService:
    return AppointmentService(store)


def get_review_service(store: DataStore = Depends(get_store)) -> ReviewService:
    return ReviewService(store)


def get_contact_service(store: DataStore = Depends(get_store)) -> ContactService:
    return ContactService(store)


def get_content_service(store: DataStore = Depends(get_store)) -> ContentService:
    return ContentService(store)


def get_election_service(store: DataStore = Depends(get_store)) -> ElectionService:
    return ElectionService(store, settings.election_date)
