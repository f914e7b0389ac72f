"""Port interface for track loading and stream resolution."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from iheart_radio_extension.domain.media.entities import (
        Shelf,
        Streamable,
        StreamableMedia,
        Track,
    )
    from iheart_radio_extension.domain.media.paging import PagedData


class TrackClient(ABC):
    """Interface for extensions whose tracks the host can play."""

    @abstractmethod
    async def load_track(self, track: Track) -> Track:
        """Return a fully populated copy of a track."""
        ...

    @abstractmethod
    async def load_streamable_media(
        self, streamable: Streamable, is_download: bool = False
    ) -> StreamableMedia:
        """Resolve a streamable into media the host player can open."""
        ...

    @abstractmethod
    def get_shelves(self, track: Track) -> PagedData[Shelf]:
        """Return shelves related to a track."""
        ...
