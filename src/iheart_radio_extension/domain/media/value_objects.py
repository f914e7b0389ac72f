"""Immutable value objects for the media model."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from iheart_radio_extension.domain.shared.types import NonEmptyStr


class StreamKind(StrEnum):
    """Stream flavours a station can advertise.

    The enum value doubles as the ``type`` extra stored on a streamable.
    """

    HLS = "hls"
    SHOUTCAST = "shoutcast"
    PLS = "pls"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[StreamKind, str] = {
    StreamKind.HLS: "HLS",
    StreamKind.SHOUTCAST: "Shoutcast",
    StreamKind.PLS: "PLS",
}


class SourceType(StrEnum):
    """How the host player should consume a resolved source."""

    HLS = "hls"
    PROGRESSIVE = "progressive"


class Playability(BaseModel):
    """Whether the host may offer a track for playback, and why not."""

    model_config = ConfigDict(frozen=True, strict=True)

    is_playable: bool = True
    reason: NonEmptyStr | None = None

    @classmethod
    def yes(cls) -> Playability:
        return cls()

    @classmethod
    def no(cls, reason: str) -> Playability:
        return cls(is_playable=False, reason=reason)
