"""In-memory ``SettingsStore`` for running the extension outside a host."""

from __future__ import annotations

from iheart_radio_extension.application.interfaces.settings_store import SettingsStore


class InMemorySettingsStore(SettingsStore):
    """Dict-backed store. Writing ``None`` removes the key."""

    def __init__(self, initial: dict[str, bool | str] | None = None) -> None:
        self._values: dict[str, bool | str] = dict(initial or {})

    def _put(self, key: str, value: bool | str | None) -> None:
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value

    def get_boolean(self, key: str) -> bool | None:
        value = self._values.get(key)
        return value if isinstance(value, bool) else None

    def put_boolean(self, key: str, value: bool | None) -> None:
        self._put(key, value)

    def get_string(self, key: str) -> str | None:
        value = self._values.get(key)
        return value if isinstance(value, str) else None

    def put_string(self, key: str, value: str | None) -> None:
        self._put(key, value)
