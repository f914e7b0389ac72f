"""Host extension backed by the iHeartRadio station directory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from iheart_radio_extension.application.interfaces.extension_client import (
    ExtensionClient,
    SettingSwitch,
)
from iheart_radio_extension.application.interfaces.home_feed_client import HomeFeedClient
from iheart_radio_extension.application.interfaces.radio_client import RadioClient
from iheart_radio_extension.application.interfaces.search_feed_client import SearchFeedClient
from iheart_radio_extension.application.interfaces.track_client import TrackClient
from iheart_radio_extension.config.settings import ApiSettings, StreamSettings
from iheart_radio_extension.domain.media.entities import (
    Album,
    Artist,
    CategoryShelf,
    Playlist,
    QuickSearchItem,
    Radio,
    Shelf,
    Streamable,
    StreamableMedia,
    StreamSource,
    Tab,
    Track,
    User,
)
from iheart_radio_extension.domain.media.paging import Feed, PagedData
from iheart_radio_extension.domain.media.value_objects import SourceType, StreamKind
from iheart_radio_extension.domain.shared.exceptions import (
    NotSupportedError,
    StationNotFoundError,
)
from iheart_radio_extension.domain.shared.messages import LogTemplates
from iheart_radio_extension.infrastructure.iheart.codec import decode
from iheart_radio_extension.infrastructure.iheart.mapping import station_to_track
from iheart_radio_extension.infrastructure.iheart.models import (
    GenreRecord,
    GenreResponse,
    StationGenreResponse,
    StationRecord,
    StationResponse,
    StationSearchResponse,
)
from iheart_radio_extension.infrastructure.iheart.pls import parse_pls

if TYPE_CHECKING:
    from iheart_radio_extension.application.interfaces.settings_store import SettingsStore
    from iheart_radio_extension.infrastructure.http.fetcher import HttpFetcher

logger = logging.getLogger(__name__)

DEFAULT_GENRES_KEY: Final[str] = "default_genres"


class IHeartRadioExtension(
    ExtensionClient, HomeFeedClient, TrackClient, RadioClient, SearchFeedClient
):
    """Adapts station directory responses into tabs, shelves, tracks and media.

    Every operation decodes a fresh response and keeps nothing afterwards; the
    only shared objects are the fetcher and the immutable settings.
    """

    def __init__(
        self,
        fetcher: HttpFetcher,
        api: ApiSettings | None = None,
        stream: StreamSettings | None = None,
        default_genres: bool = True,
    ) -> None:
        self._fetcher = fetcher
        self._api = api or ApiSettings()
        self._stream = stream or StreamSettings()
        self._default_genres_fallback = default_genres
        self._settings_store: SettingsStore | None = None

    # === Extension ===

    async def on_extension_selected(self) -> None:
        logger.debug(LogTemplates.EXTENSION_SELECTED)

    @property
    def setting_items(self) -> list[SettingSwitch]:
        return [
            SettingSwitch(
                title="Display Default Genres",
                key=DEFAULT_GENRES_KEY,
                summary=(
                    "Whether to display only default genres on the home page "
                    "or all available genres"
                ),
                default=self.default_genres,
            )
        ]

    def set_settings(self, settings: SettingsStore) -> None:
        self._settings_store = settings
        logger.debug(LogTemplates.SETTINGS_ATTACHED, type(settings).__name__)

    @property
    def default_genres(self) -> bool:
        """Curated genre list (True) or genres derived from all stations (False)."""
        if self._settings_store is None:
            return self._default_genres_fallback
        value = self._settings_store.get_boolean(DEFAULT_GENRES_KEY)
        return self._default_genres_fallback if value is None else value

    # === Fetching ===

    async def _load_stations(
        self, url: str, params: dict[str, str | int] | None = None
    ) -> list[StationRecord]:
        return decode(StationResponse, await self._fetcher.fetch(url, params)).hits

    async def _load_station(self, station_id: int) -> StationRecord:
        hits = await self._load_stations(self._api.station_detail_url(station_id))
        if not hits:
            raise StationNotFoundError(station_id)
        return hits[0]

    def _to_track(self, station: StationRecord) -> Track:
        return station_to_track(station, self._stream)

    # === Home Feed ===

    async def get_home_tabs(self) -> list[Tab]:
        if self.default_genres:
            logger.debug(LogTemplates.HOME_TABS_DEFAULT)
            body = await self._fetcher.fetch(self._api.genre_url)
            genres = decode(GenreResponse, body).hits
        else:
            logger.debug(LogTemplates.HOME_TABS_DERIVED, self._api.station_limit)
            body = await self._fetcher.fetch(
                self._api.station_url, {"limit": self._api.station_limit}
            )
            stations = decode(StationGenreResponse, body).hits
            # First occurrence of each genre id wins; order is preserved
            unique: dict[int, GenreRecord] = {}
            for station in stations:
                for genre in station.genres:
                    unique.setdefault(genre.id, genre)
            genres = list(unique.values())

        tabs = [Tab(id=str(genre.id), title=genre.name) for genre in genres]
        logger.info(LogTemplates.HOME_TABS_LOADED, len(tabs))
        return tabs

    async def _load_genre_tracks(self, genre_id: str) -> list[Track]:
        logger.debug(LogTemplates.CATEGORY_LOADING, genre_id)
        stations = await self._load_stations(
            self._api.station_url,
            {"genreId": genre_id, "limit": self._api.station_limit},
        )
        logger.debug(LogTemplates.CATEGORY_LOADED, len(stations), genre_id)
        return [self._to_track(station) for station in stations]

    def load_category(self, genre_id: str) -> PagedData[Track]:
        """Deferred station listing for one genre; each page load re-fetches."""

        async def _load() -> list[Track]:
            return await self._load_genre_tracks(genre_id)

        return PagedData.single(_load)

    def get_home_feed(self, tab: Tab | None = None) -> Feed:
        if tab is not None:
            genre_id = tab.id

            async def _load_tab() -> list[Shelf]:
                tracks = await self._load_genre_tracks(genre_id)
                return [track.to_shelf() for track in tracks]

            return PagedData.single(_load_tab).to_feed()

        async def _load_categories() -> list[Shelf]:
            tabs = await self.get_home_tabs()
            return [
                CategoryShelf(id=t.id, title=t.title, items=self.load_category(t.id))
                for t in tabs
            ]

        return PagedData.single(_load_categories).to_feed()

    # === Tracks ===

    async def load_track(self, track: Track) -> Track:
        return track

    def get_shelves(self, track: Track) -> PagedData[Shelf]:
        return PagedData.empty()

    async def _resolve_pls(self, url: str | None) -> str:
        if not url:
            logger.warning(LogTemplates.PLS_NO_URL)
            return ""
        logger.debug(LogTemplates.PLS_FETCHING, url)
        entry = parse_pls(await self._fetcher.fetch(url))
        if entry is None:
            logger.warning(LogTemplates.PLS_ENTRY_MISSING, url)
            return ""
        return entry

    async def load_streamable_media(
        self, streamable: Streamable, is_download: bool = False
    ) -> StreamableMedia:
        kind = streamable.type
        logger.debug(LogTemplates.STREAM_RESOLVING, kind, streamable.id)

        if kind == StreamKind.PLS:
            url = await self._resolve_pls(streamable.id)
        else:
            url = streamable.id

        source_type = SourceType.HLS if kind == StreamKind.HLS else SourceType.PROGRESSIVE
        source = StreamSource(url=url, type=source_type, is_live=self._stream.mark_live)
        return StreamableMedia(sources=[source], supports_download=False)

    # === Radio ===

    def load_tracks(self, radio: Radio) -> PagedData[Track]:
        return PagedData.empty()

    async def radio(self, track: Track, context: object | None = None) -> Radio:
        return Radio(id="", title="")

    async def album_radio(self, album: Album) -> Radio:
        raise NotSupportedError("Album radio")

    async def artist_radio(self, artist: Artist) -> Radio:
        raise NotSupportedError("Artist radio")

    async def user_radio(self, user: User) -> Radio:
        raise NotSupportedError("User radio")

    async def playlist_radio(self, playlist: Playlist) -> Radio:
        raise NotSupportedError("Playlist radio")

    # === Search ===

    async def quick_search(self, query: str) -> list[QuickSearchItem]:
        return []

    async def delete_quick_search(self, item: QuickSearchItem) -> None:
        return None

    async def search_tabs(self, query: str) -> list[Tab]:
        return []

    async def _search(self, query: str) -> list[Track]:
        logger.debug(LogTemplates.SEARCH_STARTED, query)
        # The directory matches the keywords as a quoted phrase
        body = await self._fetcher.fetch(self._api.search_url, {"keywords": f'"{query}"'})
        hits = decode(StationSearchResponse, body).stations
        logger.debug(LogTemplates.SEARCH_RESOLVING, len(hits))

        tracks: list[Track] = []
        for hit in hits:
            station = await self._load_station(hit.id)
            tracks.append(self._to_track(station))

        logger.info(LogTemplates.SEARCH_COMPLETED, query, len(tracks))
        return tracks

    def search_feed(self, query: str, tab: Tab | None = None) -> Feed:
        async def _load() -> list[Shelf]:
            return [track.to_shelf() for track in await self._search(query)]

        return PagedData.single(_load).to_feed()
