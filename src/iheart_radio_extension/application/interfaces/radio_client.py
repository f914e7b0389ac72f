"""Port interface for radio (endless related-tracks) sessions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from iheart_radio_extension.domain.media.entities import (
        Album,
        Artist,
        Playlist,
        Radio,
        Track,
        User,
    )
    from iheart_radio_extension.domain.media.paging import PagedData


class RadioClient(ABC):
    """Interface for building radios seeded from host items.

    Implementations raise ``NotSupportedError`` for seeds they cannot use.
    """

    @abstractmethod
    def load_tracks(self, radio: Radio) -> PagedData[Track]:
        ...

    @abstractmethod
    async def radio(self, track: Track, context: object | None = None) -> Radio:
        """Create a radio seeded from a track."""
        ...

    @abstractmethod
    async def album_radio(self, album: Album) -> Radio:
        ...

    @abstractmethod
    async def artist_radio(self, artist: Artist) -> Radio:
        ...

    @abstractmethod
    async def user_radio(self, user: User) -> Radio:
        ...

    @abstractmethod
    async def playlist_radio(self, playlist: Playlist) -> Radio:
        ...
