"""Port interface for the host's per-extension settings storage."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SettingsStore(ABC):
    """Key/value settings persisted by the host on behalf of an extension.

    Getters return ``None`` when the key has never been written.
    """

    @abstractmethod
    def get_boolean(self, key: str) -> bool | None:
        ...

    @abstractmethod
    def put_boolean(self, key: str, value: bool | None) -> None:
        ...

    @abstractmethod
    def get_string(self, key: str) -> str | None:
        ...

    @abstractmethod
    def put_string(self, key: str, value: str | None) -> None:
        ...
