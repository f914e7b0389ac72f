"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.

The host's own settings store (see ``SettingsStore``) holds the user-facing
toggles; these settings hold deployment defaults and endpoint configuration.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.media.value_objects import StreamKind
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import HttpUrlStr, NonEmptyStr, PositiveFloat, StationLimit


class ApiSettings(BaseModel):
    """Station directory endpoint configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    genre_url: HttpUrlStr = Field(
        default="https://api.iheart.com/api/v2/content/genre/",
        validation_alias=AliasChoices("genre_url", "genre_link"),
    )
    station_url: HttpUrlStr = Field(
        default="https://api.iheart.com/api/v2/content/liveStations/",
        validation_alias=AliasChoices("station_url", "station_link"),
    )
    search_url: HttpUrlStr = Field(
        default="https://api.iheart.com/api/v1/catalog/searchStation/",
        validation_alias=AliasChoices("search_url", "search_link"),
    )
    station_limit: StationLimit = Field(
        default=5000,
        validation_alias=AliasChoices("station_limit", "limit"),
    )

    def station_detail_url(self, station_id: int | str) -> str:
        """Station detail lookups append the id to the station endpoint."""
        return f"{self.station_url}{station_id}"


class HttpSettings(BaseModel):
    """HTTP transport configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    timeout_seconds: PositiveFloat = Field(
        default=10.0,
        validation_alias=AliasChoices("timeout_seconds", "timeout"),
    )
    user_agent: NonEmptyStr = "iheart-radio-extension"
    follow_redirects: bool = True


class StreamSettings(BaseModel):
    """How station stream fields turn into streamables and sources.

    ``strict_stream_check`` counts a stream field only when it is a non-empty
    string (otherwise any non-null value counts, and tracks are never marked
    unplayable). ``stream_order`` is the order streamables are listed in.
    """

    model_config = SettingsConfigDict(frozen=True)

    strict_stream_check: bool = True
    stream_order: tuple[StreamKind, ...] = (
        StreamKind.PLS,
        StreamKind.SHOUTCAST,
        StreamKind.HLS,
    )
    mark_live: bool = True

    @field_validator("stream_order", mode="before")
    @classmethod
    def validate_stream_order(
        cls, v: tuple[StreamKind | str, ...] | list[StreamKind | str]
    ) -> tuple[StreamKind, ...]:
        """Coerce names to ``StreamKind`` and reject empty or repeated orders."""
        # JSON arrays from env vars arrive as lists of strings
        order = tuple(StreamKind(str(kind).lower()) for kind in v)
        if not order:
            raise ValueError(ErrorMessages.EMPTY_STREAM_ORDER)
        if len(set(order)) != len(order):
            raise ValueError(
                ErrorMessages.DUPLICATE_STREAM_ORDER.format(order=[k.value for k in order])
            )
        return order

    @classmethod
    def legacy(cls) -> StreamSettings:
        """Behaviour of the first release: HLS first, null-only check, not live."""
        return cls(
            strict_stream_check=False,
            stream_order=(StreamKind.HLS, StreamKind.SHOUTCAST, StreamKind.PLS),
            mark_live=False,
        )


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL, DEFAULT_GENRES (top-level)
    - API__STATION_URL, API__STATION_LIMIT, etc. (nested with prefix)
    - HTTP__TIMEOUT_SECONDS, HTTP__USER_AGENT
    - STREAM__STRICT_STREAM_CHECK, STREAM__STREAM_ORDER (JSON array)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    default_genres: bool = True

    api: ApiSettings = Field(default_factory=ApiSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    stream: StreamSettings = Field(default_factory=StreamSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
