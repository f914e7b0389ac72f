"""Port interface for search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from iheart_radio_extension.domain.media.entities import QuickSearchItem, Tab
    from iheart_radio_extension.domain.media.paging import Feed


class SearchFeedClient(ABC):
    """Interface for extensions that answer search queries."""

    @abstractmethod
    async def quick_search(self, query: str) -> list[QuickSearchItem]:
        """Return type-ahead suggestions for a partial query."""
        ...

    @abstractmethod
    async def delete_quick_search(self, item: QuickSearchItem) -> None:
        ...

    @abstractmethod
    async def search_tabs(self, query: str) -> list[Tab]:
        ...

    @abstractmethod
    def search_feed(self, query: str, tab: Tab | None = None) -> Feed:
        """Return the lazily loaded result feed for a query."""
        ...
