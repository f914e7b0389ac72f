"""Core entities of the host media model populated by the extension."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from iheart_radio_extension.domain.media.paging import PagedData
from iheart_radio_extension.domain.media.value_objects import Playability, SourceType
from iheart_radio_extension.domain.shared.types import NonEmptyStr, NonNegativeInt


class ImageHolder(BaseModel):
    """Remote image reference rendered by the host."""

    model_config = ConfigDict(frozen=True, strict=True)

    url: str

    @classmethod
    def from_url(cls, url: str | None) -> ImageHolder | None:
        return cls(url=url) if url is not None else None


class Streamable(BaseModel):
    """A candidate playable source, not yet resolved.

    ``id`` holds the stored URL, ``quality`` its position among the track's
    streamables and ``extras["type"]`` the stream kind used for dispatch.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: str
    quality: NonNegativeInt = 0
    title: str | None = None
    extras: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def server(
        cls,
        id: str,
        quality: int,
        title: str | None = None,
        extras: dict[str, str] | None = None,
    ) -> Streamable:
        return cls(id=id, quality=quality, title=title, extras=dict(extras or {}))

    @property
    def type(self) -> str | None:
        return self.extras.get("type")


class StreamSource(BaseModel):
    """A concrete URL the host player can open."""

    model_config = ConfigDict(frozen=True, strict=True)

    url: str
    type: SourceType = SourceType.PROGRESSIVE
    is_live: bool = False


class StreamableMedia(BaseModel):
    """Resolved media for a streamable."""

    model_config = ConfigDict(frozen=True, strict=True)

    sources: list[StreamSource] = Field(min_length=1)
    supports_download: bool = False


class Track(BaseModel):
    """Immutable value object representing a playable station."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: NonEmptyStr
    title: str
    subtitle: str | None = None
    description: str | None = None
    cover: ImageHolder | None = None
    streamables: list[Streamable] = Field(default_factory=list)
    playability: Playability = Field(default_factory=Playability.yes)

    @property
    def is_playable(self) -> bool:
        return self.playability.is_playable

    def to_shelf(self) -> ItemShelf:
        return ItemShelf(item=self)


class Tab(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    id: NonEmptyStr
    title: str


class MediaItem(BaseModel):
    """Browsable host item this extension never produces itself."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: str
    title: str


class Album(MediaItem):
    pass


class Artist(MediaItem):
    pass


class User(MediaItem):
    pass


class Playlist(MediaItem):
    pass


class Radio(MediaItem):
    pass


class QuickSearchItem(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    query: str


class ItemShelf(BaseModel):
    """Shelf rendering a single track."""

    model_config = ConfigDict(frozen=True)

    item: Track


class CategoryShelf(BaseModel):
    """Shelf grouping stations under a genre; its tracks load on demand."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: NonEmptyStr
    title: str
    items: PagedData


Shelf = ItemShelf | CategoryShelf
