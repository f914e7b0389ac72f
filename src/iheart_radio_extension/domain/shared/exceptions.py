"""Base exception classes for extension-level errors.

Transport failures are not wrapped: ``httpx`` exceptions reach the caller as-is.
"""

from __future__ import annotations

from iheart_radio_extension.domain.shared.messages import ErrorMessages


class ExtensionError(Exception):
    """Base exception for all errors raised by the extension itself."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ParseFailureError(ExtensionError):
    """Raised when an API payload does not match its declared record shape."""

    def __init__(self, payload: str, cause: Exception | None = None) -> None:
        super().__init__(ErrorMessages.PARSE_FAILURE.format(payload=payload), code="PARSE_FAILURE")
        self.payload = payload
        self.cause = cause


class NotSupportedError(ExtensionError):
    """Raised for host capabilities this extension deliberately does not offer."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.NOT_SUPPORTED.format(operation=operation)
        super().__init__(msg, code="NOT_SUPPORTED")
        self.operation = operation


class StationNotFoundError(ExtensionError):
    """Raised when the station detail endpoint returns no hit for an id."""

    def __init__(self, station_id: int | str, message: str | None = None) -> None:
        msg = message or ErrorMessages.STATION_NOT_FOUND.format(station_id=station_id)
        super().__init__(msg, code="STATION_NOT_FOUND")
        self.station_id = station_id
