"""
Filtering, search, sorting and pagination over in-memory collections.

Every function here is pure: it takes a sequence of records (plain
dictionaries keyed by their JSON field names) and returns a new list,
leaving the input untouched.  Listings keep insertion order unless a
function says otherwise.  An empty result is never an error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .errors import ValidationError


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

MSG_INVALID_PAGE = "Tham số phân trang không hợp lệ"


@dataclass
class Page:
    """A slice of a collection plus its pagination metadata."""

    items: List[Any] = field(default_factory=list)
    total: int = 0
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    total_pages: int = 0

    def meta(self) -> Dict[str, int]:
        """Return the ``pagination`` object of the response envelope."""
        return {
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
        }


def _text(value: Any) -> str:
    return value.lower() if isinstance(value, str) else ""


def filter_equal(items: Iterable[Mapping[str, Any]], **criteria: Any) -> List[Mapping[str, Any]]:
    """Keep items whose fields equal every given criterion.

    Criteria whose value is ``None`` or an empty string are ignored, so
    optional query parameters can be passed straight through.
    """
    active = {k: v for k, v in criteria.items() if v is not None and v != ""}
    return [item for item in items if all(item.get(k) == v for k, v in active.items())]


def filter_contains(items: Iterable[Mapping[str, Any]], **criteria: Optional[str]) -> List[Mapping[str, Any]]:
    """Keep items where each field contains its criterion, ignoring case."""
    active = {k: v.lower() for k, v in criteria.items() if v}
    return [item for item in items if all(v in _text(item.get(k)) for k, v in active.items())]


def search(items: Iterable[Mapping[str, Any]], query: str, fields: Sequence[str]) -> List[Mapping[str, Any]]:
    """Case-insensitive substring search across ``fields``.

    An item matches when the lowercased query occurs in any of the
    designated fields.  Missing or non-string fields never match.
    There is no ranking: matches come back in their original order.
    """
    needle = query.lower()
    return [item for item in items if any(needle in _text(item.get(f)) for f in fields)]


def sort_by_views(items: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Return items ordered by ``views`` descending; ties keep their order."""
    return sorted(items, key=lambda item: item.get("views") or 0, reverse=True)


def paginate(items: Sequence[Any], page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Page:
    """Return the ``page``-th slice of ``limit`` items (pages are 1-indexed).

    Raises
    ------
    ValidationError
        If ``page`` or ``limit`` is smaller than 1.
    """
    if page < 1 or limit < 1:
        raise ValidationError(MSG_INVALID_PAGE)
    start = (page - 1) * limit
    total = len(items)
    return Page(
        items=list(items[start:start + limit]),
        total=total,
        page=page,
        limit=limit,
        total_pages=math.ceil(total / limit),
    )
