"""
Unit Tests for Application Settings Configuration

Tests for:
- Default values for endpoint, transport and stream settings
- Loading settings from (nested) environment variables
- Legacy endpoint field names
- Custom validators (log level, stream order)
- Settings caching and clearing
"""

import pytest
from pydantic import ValidationError

from iheart_radio_extension.config.settings import (
    ApiSettings,
    HttpSettings,
    Settings,
    StreamSettings,
    clear_settings_cache,
    get_settings,
)
from iheart_radio_extension.domain.media.value_objects import StreamKind

_ENV_VARS = (
    "ENVIRONMENT",
    "DEBUG",
    "LOG_LEVEL",
    "DEFAULT_GENRES",
    "API__STATION_URL",
    "API__STATION_LIMIT",
    "HTTP__TIMEOUT_SECONDS",
    "STREAM__STRICT_STREAM_CHECK",
    "STREAM__STREAM_ORDER",
    "STREAM__MARK_LIVE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate each test from the developer's environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# ApiSettings Tests
# =============================================================================


class TestApiSettings:
    """Unit tests for ApiSettings configuration."""

    def test_create_with_defaults(self):
        """Should point at the public directory endpoints."""
        api = ApiSettings()

        assert api.genre_url == "https://api.iheart.com/api/v2/content/genre/"
        assert api.station_url == "https://api.iheart.com/api/v2/content/liveStations/"
        assert api.search_url == "https://api.iheart.com/api/v1/catalog/searchStation/"
        assert api.station_limit == 5000

    def test_station_detail_url_appends_id(self):
        api = ApiSettings(station_url="https://api.test/liveStations/")

        assert api.station_detail_url(7) == "https://api.test/liveStations/7"

    def test_accepts_legacy_field_names(self):
        """Should accept the older ``*_link`` and ``limit`` names."""
        api = ApiSettings(station_link="https://api.test/s/", limit=10)

        assert api.station_url == "https://api.test/s/"
        assert api.station_limit == 10

    @pytest.mark.parametrize("limit", [0, 5001])
    def test_station_limit_out_of_range(self, limit):
        with pytest.raises(ValidationError):
            ApiSettings(station_limit=limit)

    def test_non_http_url_rejected(self):
        with pytest.raises(ValidationError):
            ApiSettings(genre_url="ftp://api.test/genre/")

    def test_frozen(self):
        api = ApiSettings()

        with pytest.raises(ValidationError):
            api.station_limit = 10


# =============================================================================
# HttpSettings Tests
# =============================================================================


class TestHttpSettings:
    def test_create_with_defaults(self):
        http = HttpSettings()

        assert http.timeout_seconds == 10.0
        assert http.user_agent == "iheart-radio-extension"
        assert http.follow_redirects is True

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            HttpSettings(timeout_seconds=0)


# =============================================================================
# StreamSettings Tests
# =============================================================================


class TestStreamSettings:
    """Unit tests for stream selection settings."""

    def test_defaults_are_strict_pls_first_and_live(self):
        stream = StreamSettings()

        assert stream.strict_stream_check is True
        assert stream.stream_order == (StreamKind.PLS, StreamKind.SHOUTCAST, StreamKind.HLS)
        assert stream.mark_live is True

    def test_legacy_profile(self):
        stream = StreamSettings.legacy()

        assert stream.strict_stream_check is False
        assert stream.stream_order == (StreamKind.HLS, StreamKind.SHOUTCAST, StreamKind.PLS)
        assert stream.mark_live is False

    def test_stream_order_coerces_names(self):
        """Should accept stream names in any case."""
        stream = StreamSettings(stream_order=["HLS", "pls"])

        assert stream.stream_order == (StreamKind.HLS, StreamKind.PLS)

    def test_empty_stream_order_rejected(self):
        with pytest.raises(ValidationError, match="at least one stream kind"):
            StreamSettings(stream_order=[])

    def test_duplicate_stream_order_rejected(self):
        with pytest.raises(ValidationError, match="duplicates"):
            StreamSettings(stream_order=["hls", "HLS"])

    def test_unknown_stream_kind_rejected(self):
        with pytest.raises(ValidationError):
            StreamSettings(stream_order=["rtmp"])


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    """Unit tests for the root Settings object."""

    def test_create_with_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.default_genres is True
        assert settings.api == ApiSettings()
        assert settings.stream == StreamSettings()

    def test_log_level_is_uppercased(self):
        settings = Settings(_env_file=None, log_level="debug")

        assert settings.log_level == "DEBUG"

    def test_invalid_log_level_raises_error(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, log_level="VERBOSE")

    def test_loads_top_level_env_vars(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("DEFAULT_GENRES", "false")

        settings = Settings(_env_file=None)

        assert settings.log_level == "WARNING"
        assert settings.default_genres is False

    def test_loads_nested_env_vars(self, monkeypatch):
        """Should read nested settings with the ``__`` delimiter."""
        monkeypatch.setenv("API__STATION_LIMIT", "25")
        monkeypatch.setenv("HTTP__TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("STREAM__STRICT_STREAM_CHECK", "false")
        monkeypatch.setenv("STREAM__STREAM_ORDER", '["hls", "shoutcast", "pls"]')

        settings = Settings(_env_file=None)

        assert settings.api.station_limit == 25
        assert settings.http.timeout_seconds == 2.5
        assert settings.stream.strict_stream_check is False
        assert settings.stream.stream_order[0] is StreamKind.HLS

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_clear_settings_cache(self, monkeypatch):
        first = get_settings()
        clear_settings_cache()

        assert get_settings() is not first
