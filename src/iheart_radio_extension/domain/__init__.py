# ruff: noqa: N999
"""
Domain Layer

Host-facing content model and shared kernel:
- shared/: Exceptions, message templates and reusable field types
- media/: Tracks, streamables, shelves and the lazy paged feed
"""

from iheart_radio_extension.domain.shared.exceptions import ExtensionError

__all__ = [
    "ExtensionError",
]
