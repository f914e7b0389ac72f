"""
Shared Domain Kernel

Contains exceptions and message constants shared across the extension.
"""

from iheart_radio_extension.domain.shared.exceptions import (
    ExtensionError,
    NotSupportedError,
    ParseFailureError,
    StationNotFoundError,
)

__all__ = [
    "ExtensionError",
    "ParseFailureError",
    "NotSupportedError",
    "StationNotFoundError",
]
