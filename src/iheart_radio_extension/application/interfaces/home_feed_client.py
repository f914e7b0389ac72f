"""Port interface for the home screen feed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from iheart_radio_extension.domain.media.entities import Tab
    from iheart_radio_extension.domain.media.paging import Feed


class HomeFeedClient(ABC):
    """Interface for extensions that populate the home screen."""

    @abstractmethod
    async def get_home_tabs(self) -> list[Tab]:
        """Return the tabs shown across the top of the home screen."""
        ...

    @abstractmethod
    def get_home_feed(self, tab: Tab | None = None) -> Feed:
        """Return the lazily loaded feed for a tab, or the tab-less overview."""
        ...
