"""
Application Interfaces (Ports)

Abstract capability interfaces that define the contract between the host
application and an extension. One extension class may implement several.
"""

from iheart_radio_extension.application.interfaces.extension_client import (
    ExtensionClient,
    SettingSwitch,
)
from iheart_radio_extension.application.interfaces.home_feed_client import HomeFeedClient
from iheart_radio_extension.application.interfaces.radio_client import RadioClient
from iheart_radio_extension.application.interfaces.search_feed_client import SearchFeedClient
from iheart_radio_extension.application.interfaces.settings_store import SettingsStore
from iheart_radio_extension.application.interfaces.track_client import TrackClient

__all__ = [
    "ExtensionClient",
    "SettingSwitch",
    "HomeFeedClient",
    "TrackClient",
    "RadioClient",
    "SearchFeedClient",
    "SettingsStore",
]
