"""Mapping of station records onto host tracks."""

from __future__ import annotations

import logging

from iheart_radio_extension.config.settings import StreamSettings
from iheart_radio_extension.domain.media.entities import ImageHolder, Streamable, Track
from iheart_radio_extension.domain.media.value_objects import Playability, StreamKind
from iheart_radio_extension.domain.shared.messages import ErrorMessages, LogTemplates
from iheart_radio_extension.infrastructure.iheart.models import StationRecord, StationStreams

logger = logging.getLogger(__name__)


def _stream_url(streams: StationStreams, kind: StreamKind) -> str | None:
    # StationStreams fields are named after the StreamKind values
    return getattr(streams, kind.value)


def build_streamables(streams: StationStreams, settings: StreamSettings) -> list[Streamable]:
    """List the station's streams in ``settings.stream_order``.

    Indices are positions in the returned list, so they stay contiguous when
    a stream is skipped.
    """
    usable: list[tuple[str, StreamKind]] = []
    for kind in settings.stream_order:
        url = _stream_url(streams, kind)
        if url is None or (settings.strict_stream_check and not url):
            continue
        usable.append((url, kind))

    return [
        Streamable.server(url, index, kind.display_name, {"type": kind.value})
        for index, (url, kind) in enumerate(usable)
    ]


def station_to_track(station: StationRecord, settings: StreamSettings) -> Track:
    streamables = build_streamables(station.streams, settings)

    playability = Playability.yes()
    if settings.strict_stream_check and not streamables:
        logger.debug(LogTemplates.TRACK_NO_STREAMS, station.id)
        playability = Playability.no(ErrorMessages.NO_SUPPORTED_STREAMS)

    return Track(
        id=str(station.id),
        title=station.name,
        subtitle=station.description,
        description=station.description,
        cover=ImageHolder.from_url(station.logo),
        streamables=streamables,
        playability=playability,
    )
