"""
Extension Client Interface

Base capability every extension implements: lifecycle hook and settings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from iheart_radio_extension.domain.shared.types import NonEmptyStr

if TYPE_CHECKING:
    from iheart_radio_extension.application.interfaces.settings_store import SettingsStore


class SettingSwitch(BaseModel):
    """Boolean toggle the host renders on the extension's settings screen."""

    model_config = ConfigDict(frozen=True, strict=True)

    title: NonEmptyStr
    key: NonEmptyStr
    summary: str | None = None
    default: bool = False


class ExtensionClient(ABC):
    """Abstract interface for a host extension.

    Implementations should handle:
    - Reacting to being selected by the user
    - Declaring their settings
    - Reading settings from the host-provided store
    """

    @abstractmethod
    async def on_extension_selected(self) -> None:
        """Called when the user switches to this extension."""
        ...

    @property
    @abstractmethod
    def setting_items(self) -> list[SettingSwitch]:
        """Settings the host should render for this extension."""
        ...

    @abstractmethod
    def set_settings(self, settings: SettingsStore) -> None:
        """Attach the host settings store.

        Args:
            settings: Store scoped to this extension.
        """
        ...
