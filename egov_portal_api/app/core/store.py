"""
In-memory data store for the portal.

This module replaces a database: it loads the service catalog and the
demo content from JSON files once at startup and keeps every
submission (contacts, reviews, appointments, applications,
subscriptions, feedback) in process memory.  Nothing is persisted;
the lifetime of the data is the lifetime of the process.

Each mutable collection owns a lock, and every read-modify-write
(appending a record, bumping a service's view counter, issuing a code)
happens while holding it, so the store is safe to share between the
worker threads of a threaded server.  Records are plain dictionaries
keyed by their JSON field names; callers receive copies, never the
stored objects.

A ``DataStore`` is built once by ``create_app`` and attached to
``app.state``.  Route handlers obtain it through the ``get_store``
dependency, which makes it easy to give each test its own store.
"""

from __future__ import annotations

import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Request
from pydantic import ValidationError as SchemaError

from .codes import CodeGenerator
from .config import resolve_data_dir, settings
from .tracking import TrackingRegistry


logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Predicate = Callable[[Record], bool]

SERVICES_FILE = "services.json"
DEMO_FILE = "demo.json"


class Collection:
    """An append-only list of records guarded by a lock."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._items: List[Record] = []
        self._lock = threading.Lock()
        self._last_id = 0

    def next_id(self) -> int:
        """Return a new record id, unique within this collection."""
        with self._lock:
            self._last_id += 1
            return self._last_id

    def append(self, record: Record) -> Record:
        with self._lock:
            self._items.append(record)
        logger.debug("Stored record %s in %s", record.get("id"), self.name)
        return copy.deepcopy(record)

    def find(self, predicate: Predicate) -> Optional[Record]:
        with self._lock:
            for item in self._items:
                if predicate(item):
                    return copy.deepcopy(item)
        return None

    def filter(self, predicate: Predicate) -> List[Record]:
        with self._lock:
            return [copy.deepcopy(item) for item in self._items if predicate(item)]

    def exists(self, predicate: Predicate) -> bool:
        with self._lock:
            return any(predicate(item) for item in self._items)

    def append_unless(self, predicate: Predicate, record: Record) -> bool:
        """Append ``record`` only if no stored record matches ``predicate``.

        The check and the append happen under one lock acquisition.
        Returns ``True`` when the record was stored.
        """
        with self._lock:
            if any(predicate(item) for item in self._items):
                return False
            self._items.append(record)
            return True

    def snapshot(self) -> List[Record]:
        with self._lock:
            return copy.deepcopy(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Error loading data from %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.error("Ignoring %s: top-level value is not an object", path)
        return {}
    logger.info("Successfully loaded data from %s", path)
    return data


def _normalise_services(raw: List[Any]) -> List[Record]:
    # Imported here to keep core free of a module-level dependency on schemas.
    from egov_portal_api.app.schemas.catalog import ServiceItem

    services = []
    for item in raw:
        try:
            services.append(ServiceItem.model_validate(item).model_dump(by_alias=True, exclude_none=True))
        except SchemaError as exc:
            logger.warning("Skipping malformed service entry %r: %s", item, exc)
    return services


def load_dataset(data_dir: Path) -> Dict[str, Any]:
    """Read the catalog and demo content from ``data_dir``.

    A missing or unreadable file yields empty collections and an error
    log; the portal still starts.
    """
    catalog = _read_json(data_dir / SERVICES_FILE)
    demo = _read_json(data_dir / DEMO_FILE)
    dataset = {
        "categories": list(catalog.get("categories") or []),
        "services": _normalise_services(catalog.get("services") or []),
        "news": list(catalog.get("news") or []),
        "statistics": dict(catalog.get("statistics") or {}),
        "elections": dict(catalog.get("elections") or {}),
        "demo": demo,
    }
    if not dataset["categories"]:
        logger.error("Warning: no catalog data loaded, using empty data")
    logger.info(
        "Dataset ready: %d categories, %d services, %d news items",
        len(dataset["categories"]),
        len(dataset["services"]),
        len(dataset["news"]),
    )
    return dataset


class DataStore:
    """Holds the catalog, demo content and all in-memory submissions."""

    def __init__(self, dataset: Optional[Dict[str, Any]] = None, code_max_attempts: int = 20) -> None:
        dataset = dataset or {}
        self.categories: List[Record] = list(dataset.get("categories") or [])
        self._services: List[Record] = list(dataset.get("services") or [])
        self._services_lock = threading.Lock()
        self.news: List[Record] = list(dataset.get("news") or [])
        self.statistics: Record = dict(dataset.get("statistics") or {})
        self.elections: Record = dict(dataset.get("elections") or {})
        self.demo: Record = dict(dataset.get("demo") or {})

        self.contacts = Collection("contacts")
        self.subscriptions = Collection("subscriptions")
        self.reviews = Collection("reviews")
        self.appointments = Collection("appointments")
        self.applications = Collection("applications")
        self.feedback = Collection("feedback")

        self.tracking = TrackingRegistry()
        seeded = self.tracking.seed(self.demo.get("trackingRecords") or [])
        logger.info("Seeded %d demo tracking records", seeded)

        self.application_codes = CodeGenerator(
            "HS", digits=6, with_year=True, exists=self.tracking.contains, max_attempts=code_max_attempts
        )
        self.appointment_codes = CodeGenerator(
            "LH",
            digits=8,
            exists=lambda code: self.appointments.exists(lambda a: a["code"] == code),
            max_attempts=code_max_attempts,
        )
        self.feedback_codes = CodeGenerator(
            "FB",
            digits=8,
            exists=lambda code: self.feedback.exists(lambda f: f["ticketCode"] == code),
            max_attempts=code_max_attempts,
        )
        self.contact_codes = CodeGenerator(
            "DVC",
            exists=lambda code: self.contacts.exists(lambda c: c["ticketId"] == code),
            max_attempts=code_max_attempts,
        )
        self.subscription_codes = CodeGenerator(
            "SUB",
            exists=lambda code: self.subscriptions.exists(lambda s: s["code"] == code),
            max_attempts=code_max_attempts,
        )

    @classmethod
    def from_directory(cls, data_dir: str, code_max_attempts: int = 20) -> "DataStore":
        return cls(load_dataset(resolve_data_dir(data_dir)), code_max_attempts=code_max_attempts)

    # Catalog access -----------------------------------------------------

    def list_services(self) -> List[Record]:
        with self._services_lock:
            return copy.deepcopy(self._services)

    def get_service(self, service_id: str) -> Optional[Record]:
        with self._services_lock:
            for service in self._services:
                if service.get("id") == service_id:
                    return copy.deepcopy(service)
        return None

    def increment_views(self, service_id: str) -> Optional[Record]:
        """Add one view to a service and return the updated copy.

        Returns ``None`` when no service has ``service_id``.
        """
        with self._services_lock:
            for service in self._services:
                if service.get("id") == service_id:
                    service["views"] = (service.get("views") or 0) + 1
                    return copy.deepcopy(service)
        return None

    def get_category(self, category_id: str) -> Optional[Record]:
        for category in self.categories:
            if category.get("id") == category_id:
                return copy.deepcopy(category)
        return None

    def demo_items(self, key: str) -> List[Record]:
        return copy.deepcopy(self.demo.get(key) or [])


def build_store() -> DataStore:
    """Create a store from the configured data directory."""
    return DataStore.from_directory(settings.data_dir, code_max_attempts=settings.code_max_attempts)


def get_store(request: Request) -> DataStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
