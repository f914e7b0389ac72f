"""Pydantic models for the station directory's JSON payloads.

These are infrastructure-specific models for parsing external API data.
Unknown fields are ignored so new API fields do not break decoding.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GenreRecord(BaseModel):
    """A browsing category."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str


class GenreResponse(BaseModel):
    """Curated genre list endpoint payload."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    hits: list[GenreRecord]


class StationGenreRecord(BaseModel):
    """A station read only for the genres it is filed under."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    genres: list[GenreRecord] = Field(default_factory=list)


class StationGenreResponse(BaseModel):
    """Station list payload viewed as a source of genres."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    hits: list[StationGenreRecord]


class StationStreams(BaseModel):
    """Stream URLs a station advertises; any of them may be missing."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    hls: str | None = Field(default=None, alias="secure_hls_stream")
    shoutcast: str | None = Field(default=None, alias="secure_shoutcast_stream")
    pls: str | None = Field(default=None, alias="secure_pls_stream")


class StationRecord(BaseModel):
    """One radio station."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    description: str
    logo: str | None = None
    streams: StationStreams


class StationResponse(BaseModel):
    """Station list and station detail payload."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    hits: list[StationRecord]


class SearchResultRecord(BaseModel):
    """Search hit; carries only the id of the matching station."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int


class StationSearchResponse(BaseModel):
    """Search endpoint payload."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    stations: list[SearchResultRecord]
