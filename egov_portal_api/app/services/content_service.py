"""
Service layer for the portal's static content: news and statistics.
"""

from typing import List

from egov_portal_api.app.core.store import DataStore, Record


class ContentService:
    """Read access to news items and the portal statistics block."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    async def news(self, limit: int = 5) -> List[Record]:
        """Return the ``limit`` most recent news items (dataset order)."""
        return [dict(n) for n in self.store.news[:limit]]

    async def statistics(self) -> Record:
        return dict(self.store.statistics)
