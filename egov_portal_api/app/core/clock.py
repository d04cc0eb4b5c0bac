"""Timestamp helpers producing the formats used in API payloads.

All values are taken from the UTC clock, so dates and timestamps of
one record always agree.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and ``Z``."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_iso(offset_days: int = 0, now: Optional[datetime] = None) -> str:
    """UTC date of ``now`` (default: the current time) plus ``offset_days``, as ``YYYY-MM-DD``."""
    return ((now or utc_now()).date() + timedelta(days=offset_days)).isoformat()
