"""Lazy paged data and feeds handed to the host.

Nothing is fetched when a ``PagedData`` is built; the host pulls pages when it
renders them, and every pull runs the loader again.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from iheart_radio_extension.domain.media.entities import Tab

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of items plus the token for the next page, if any."""

    items: list[T]
    continuation: str | None = None


PageLoader = Callable[[str | None], Awaitable[Page[T]]]


class PagedData(Generic[T]):
    """Deferred, possibly multi-page listing."""

    def __init__(self, loader: PageLoader[T]) -> None:
        self._loader = loader

    @classmethod
    def single(cls, loader: Callable[[], Awaitable[list[T]]]) -> PagedData[T]:
        """Wrap a loader that produces every item in one page."""

        async def _load(continuation: str | None) -> Page[T]:
            return Page(items=await loader())

        return cls(_load)

    @classmethod
    def empty(cls) -> PagedData[T]:
        async def _load(continuation: str | None) -> Page[T]:
            return Page(items=[])

        return cls(_load)

    async def load_page(self, continuation: str | None = None) -> Page[T]:
        return await self._loader(continuation)

    async def load_all(self) -> list[T]:
        """Follow continuations until the last page and return every item."""
        items: list[T] = []
        continuation: str | None = None
        while True:
            page = await self.load_page(continuation)
            items.extend(page.items)
            if page.continuation is None:
                return items
            continuation = page.continuation

    def to_feed(self, tabs: list[Tab] | None = None) -> Feed:
        return Feed(pages=self, tabs=list(tabs or []))


@dataclass
class Feed:
    """Shelves for a screen of the host UI, optionally split into tabs."""

    pages: PagedData[Any]
    tabs: list[Tab] = field(default_factory=list)

    async def load_all(self) -> list[Any]:
        return await self.pages.load_all()
