"""
Registry of tracking codes.

The ``TrackingRegistry`` maps an application code (``HS...``) to its
status record.  Codes are normalised in one place, ``normalize_code``,
so lookups are insensitive to surrounding whitespace and letter case
no matter which endpoint the code arrives through.  Demo records are
loaded with ``seed`` at startup; they are readable by everyone and can
never be replaced by a submission that happens to reuse their code.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, Iterable, Optional

from .errors import DuplicateCodeError, NotFoundError


logger = logging.getLogger(__name__)

MSG_TRACKING_NOT_FOUND = "Không tìm thấy hồ sơ với mã số này"


def normalize_code(code: Optional[str]) -> str:
    """Return the canonical form of a tracking code."""
    return (code or "").strip().upper()


class TrackingRegistry:
    """Thread-safe code to record map with write-protected seed entries."""

    def __init__(self) -> None:
        self._records: Dict[str, Dict[str, Any]] = {}
        self._seeded: set = set()
        self._lock = threading.Lock()

    def seed(self, records: Iterable[Dict[str, Any]]) -> int:
        """Load demo records.  Returns the number of records loaded."""
        count = 0
        with self._lock:
            for record in records:
                code = normalize_code(record.get("code"))
                if not code:
                    continue
                self._records[code] = copy.deepcopy(record)
                self._seeded.add(code)
                count += 1
        return count

    def put(self, code: str, record: Dict[str, Any]) -> None:
        """Insert a new record under ``code``.

        Raises
        ------
        DuplicateCodeError
            If ``code`` is already registered, seed or not.
        """
        key = normalize_code(code)
        with self._lock:
            if key in self._records:
                logger.warning("Rejected duplicate tracking code %s (seed=%s)", key, key in self._seeded)
                raise DuplicateCodeError()
            self._records[key] = copy.deepcopy(record)

    def get(self, code: str) -> Dict[str, Any]:
        """Return a copy of the record stored under ``code``.

        Raises
        ------
        NotFoundError
            If no record exists for ``code``.
        """
        key = normalize_code(code)
        with self._lock:
            record = self._records.get(key)
            if record is None:
                raise NotFoundError(MSG_TRACKING_NOT_FOUND)
            return copy.deepcopy(record)

    def contains(self, code: str) -> bool:
        with self._lock:
            return normalize_code(code) in self._records

    def is_seed(self, code: str) -> bool:
        with self._lock:
            return normalize_code(code) in self._seeded

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
