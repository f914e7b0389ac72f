"""
Media Model

The host application's content model as populated by this extension:
tracks and their streamables, tabs, shelves and the lazily paged feed.
"""

from iheart_radio_extension.domain.media.entities import (
    Album,
    Artist,
    CategoryShelf,
    ImageHolder,
    ItemShelf,
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
from iheart_radio_extension.domain.media.paging import Feed, Page, PagedData
from iheart_radio_extension.domain.media.value_objects import Playability, SourceType, StreamKind

__all__ = [
    # Entities
    "Track",
    "Tab",
    "Radio",
    "Album",
    "Artist",
    "User",
    "Playlist",
    "QuickSearchItem",
    "ImageHolder",
    "Streamable",
    "StreamSource",
    "StreamableMedia",
    "ItemShelf",
    "CategoryShelf",
    "Shelf",
    # Paging
    "Page",
    "PagedData",
    "Feed",
    # Value Objects
    "StreamKind",
    "SourceType",
    "Playability",
]
