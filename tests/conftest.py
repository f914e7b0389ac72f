import json
from typing import Any
from unittest.mock import AsyncMock
from urllib.parse import urlencode

import pytest

from iheart_radio_extension.config.settings import ApiSettings, StreamSettings

# ============================================================================
# Endpoints
# ============================================================================

GENRE_URL = "https://api.iheart.com/api/v2/content/genre/"
STATION_URL = "https://api.iheart.com/api/v2/content/liveStations/"
SEARCH_URL = "https://api.iheart.com/api/v1/catalog/searchStation/"


def route(url: str, params: dict[str, Any] | None = None) -> str:
    """Key a request the same way the routed fetcher does."""
    return f"{url}?{urlencode(params)}" if params else url


# ============================================================================
# Payload Builders
# ============================================================================


def station_json(
    station_id: int,
    name: str = "Station",
    description: str = "Description",
    *,
    logo: str | None = None,
    hls: str | None = None,
    shoutcast: str | None = None,
    pls: str | None = None,
    genres: list[tuple[int, str]] | None = None,
) -> dict[str, Any]:
    streams: dict[str, str] = {}
    if hls is not None:
        streams["secure_hls_stream"] = hls
    if shoutcast is not None:
        streams["secure_shoutcast_stream"] = shoutcast
    if pls is not None:
        streams["secure_pls_stream"] = pls

    station: dict[str, Any] = {
        "id": station_id,
        "name": name,
        "description": description,
        "streams": streams,
        "genres": [{"id": gid, "name": gname} for gid, gname in genres or []],
    }
    if logo is not None:
        station["logo"] = logo
    return station


def stations_body(*stations: dict[str, Any]) -> str:
    return json.dumps({"hits": list(stations)})


def genres_body(*genres: tuple[int, str]) -> str:
    return json.dumps({"hits": [{"id": gid, "name": name} for gid, name in genres]})


def search_body(*station_ids: int) -> str:
    return json.dumps({"stations": [{"id": sid} for sid in station_ids]})


# ============================================================================
# Fetcher Fixtures
# ============================================================================


def make_fetcher(routes: dict[str, str]) -> AsyncMock:
    """AsyncMock fetcher answering from ``routes`` keyed by ``route()``."""
    fetcher = AsyncMock()

    async def _fetch(url: str, params: dict[str, Any] | None = None) -> str:
        return routes[route(url, params)]

    fetcher.fetch.side_effect = _fetch
    return fetcher


@pytest.fixture
def api_settings():
    """Default endpoint settings."""
    return ApiSettings()


@pytest.fixture
def stream_settings():
    """Default (strict, PLS-first, live) stream settings."""
    return StreamSettings()


@pytest.fixture
def make_extension(api_settings, stream_settings):
    """Factory building an extension around a routed mock fetcher."""
    from iheart_radio_extension.infrastructure.iheart.extension import IHeartRadioExtension

    def _make(
        routes: dict[str, str] | None = None,
        *,
        stream: StreamSettings | None = None,
        default_genres: bool = True,
    ):
        fetcher = make_fetcher(routes or {})
        extension = IHeartRadioExtension(
            fetcher=fetcher,
            api=api_settings,
            stream=stream or stream_settings,
            default_genres=default_genres,
        )
        return extension, fetcher

    return _make
