"""Dependency Injection Container

Manages the extension's dependency graph, providing lazy initialization
and lifecycle management for the HTTP fetcher, the settings store and the
extension itself. Components are created on first access and cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.settings_store import SettingsStore
    from ..infrastructure.http.fetcher import HttpFetcher
    from ..infrastructure.iheart.extension import IHeartRadioExtension
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    The host may hand over its own settings store with ``set_settings_store``
    before the extension is first accessed; otherwise an in-memory store is used.
    """

    settings: Settings

    # Infrastructure adapters
    _fetcher: HttpFetcher | None = None
    _settings_store: SettingsStore | None = None

    # Extension
    _extension: IHeartRadioExtension | None = None

    def set_settings_store(self, store: SettingsStore) -> None:
        """Use a host-provided settings store."""
        self._settings_store = store
        if self._extension is not None:
            self._extension.set_settings(store)

    # === Infrastructure Adapters ===

    @property
    def fetcher(self) -> HttpFetcher:
        """Get the shared HTTP fetcher."""
        if self._fetcher is None:
            from ..infrastructure.http.fetcher import HttpFetcher

            self._fetcher = HttpFetcher(self.settings.http)
        return self._fetcher

    @property
    def settings_store(self) -> SettingsStore:
        """Get the settings store."""
        if self._settings_store is None:
            from ..infrastructure.settings_store import InMemorySettingsStore

            self._settings_store = InMemorySettingsStore()
        return self._settings_store

    # === Extension ===

    @property
    def extension(self) -> IHeartRadioExtension:
        """Get the extension, wired to the fetcher and settings store."""
        if self._extension is None:
            from ..infrastructure.iheart.extension import IHeartRadioExtension

            self._extension = IHeartRadioExtension(
                fetcher=self.fetcher,
                api=self.settings.api,
                stream=self.settings.stream,
                default_genres=self.settings.default_genres,
            )
            self._extension.set_settings(self.settings_store)
        return self._extension

    # === Lifecycle ===

    async def shutdown(self) -> None:
        """Release the HTTP client and drop cached instances."""
        if self._fetcher is not None:
            await self._fetcher.aclose()

        self._fetcher = None
        self._extension = None


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
