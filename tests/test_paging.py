"""Tests for lazy paged data and feeds."""

from unittest.mock import AsyncMock

import pytest

from iheart_radio_extension.domain.media.entities import Tab
from iheart_radio_extension.domain.media.paging import Feed, Page, PagedData


class TestPagedData:
    """Deferred loading semantics."""

    @pytest.mark.asyncio
    async def test_single_does_not_load_on_creation(self):
        loader = AsyncMock(return_value=[1, 2])

        PagedData.single(loader)

        loader.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_single_reloads_every_time(self):
        """Should run the loader on every page load."""
        loader = AsyncMock(side_effect=[[1], [1, 2]])
        data = PagedData.single(loader)

        first = await data.load_page()
        second = await data.load_page()

        assert first.items == [1]
        assert second.items == [1, 2]
        assert first.continuation is None
        assert loader.await_count == 2

    @pytest.mark.asyncio
    async def test_load_all_follows_continuations(self):
        """Should keep loading until a page has no continuation."""
        pages = {
            None: Page(items=["a", "b"], continuation="2"),
            "2": Page(items=["c"], continuation="3"),
            "3": Page(items=["d"]),
        }

        async def loader(continuation):
            return pages[continuation]

        assert await PagedData(loader).load_all() == ["a", "b", "c", "d"]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await PagedData.empty().load_all() == []

    @pytest.mark.asyncio
    async def test_loader_errors_propagate(self):
        data = PagedData.single(AsyncMock(side_effect=RuntimeError("boom")))

        with pytest.raises(RuntimeError, match="boom"):
            await data.load_all()


class TestFeed:
    """Feeds wrap paged shelves with optional tabs."""

    @pytest.mark.asyncio
    async def test_to_feed_without_tabs(self):
        feed = PagedData.single(AsyncMock(return_value=["x"])).to_feed()

        assert isinstance(feed, Feed)
        assert feed.tabs == []
        assert await feed.load_all() == ["x"]

    def test_to_feed_copies_tabs(self):
        tabs = [Tab(id="1", title="Rock")]

        feed = PagedData.empty().to_feed(tabs)
        tabs.append(Tab(id="2", title="Pop"))

        assert [t.id for t in feed.tabs] == ["1"]
