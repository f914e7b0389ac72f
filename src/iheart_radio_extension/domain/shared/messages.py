"""Centralized message constants for error messages and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Decoding
    PARSE_FAILURE = "Failed to parse JSON: {payload}"

    # Capabilities
    NOT_SUPPORTED = "{operation} is not supported"

    # Lookup
    STATION_NOT_FOUND = "Station '{station_id}' was not returned by the station endpoint"

    # Playability
    NO_SUPPORTED_STREAMS = "No Supported Streams Found"

    # Settings
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    EMPTY_STREAM_ORDER = "stream_order must name at least one stream kind"
    DUPLICATE_STREAM_ORDER = "stream_order contains duplicates: {order}"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Extension Lifecycle
    EXTENSION_SELECTED = "Extension selected"
    SETTINGS_ATTACHED = "Host settings store attached: %s"
    HTTP_CLIENT_CREATED = "HTTP client created (timeout=%.1fs)"
    HTTP_CLIENT_CLOSED = "HTTP client closed"

    # HTTP
    HTTP_GET = "GET %s params=%s"
    HTTP_RESPONSE = "GET %s -> %s (%d bytes)"

    # Decoding
    DECODE_FAILED = "Failed to decode %s payload (%d validation errors)"

    # Feed Building
    HOME_TABS_DEFAULT = "Loading curated genre tabs"
    HOME_TABS_DERIVED = "Deriving genre tabs from station list (limit=%d)"
    HOME_TABS_LOADED = "Loaded %d genre tabs"
    CATEGORY_LOADING = "Loading stations for genre %s"
    CATEGORY_LOADED = "Loaded %d stations for genre %s"
    SEARCH_STARTED = "Searching stations for '%s'"
    SEARCH_RESOLVING = "Resolving %d search hits"
    SEARCH_COMPLETED = "Search for '%s' produced %d tracks"
    TRACK_NO_STREAMS = "Station %s has no supported streams"

    # Stream Resolution
    STREAM_RESOLVING = "Resolving %s streamable %s"
    PLS_FETCHING = "Fetching PLS playlist %s"
    PLS_NO_URL = "PLS streamable has no URL; resolving to empty source"
    PLS_ENTRY_MISSING = "No File1= entry in PLS playlist %s; resolving to empty source"

    # Entry Point
    CLI_COMMAND = "Running command '%s'"
    CLI_COMMAND_FAILED = "Command '%s' failed: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"
