"""HTTP transport used to talk to the station directory."""

from iheart_radio_extension.infrastructure.http.fetcher import HttpFetcher

__all__ = ["HttpFetcher"]
