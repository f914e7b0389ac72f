"""Plain GET fetcher over a shared ``httpx.AsyncClient``.

No retries and no authentication: a failed request raises the ``httpx``
exception unchanged and aborts the caller's operation.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from iheart_radio_extension.config.settings import HttpSettings
from iheart_radio_extension.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class HttpFetcher:
    def __init__(
        self,
        settings: HttpSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or HttpSettings()
        self._owns_client = client is None
        self._client = client or self._build_client()

    def _build_client(self) -> httpx.AsyncClient:
        client = httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            follow_redirects=self._settings.follow_redirects,
            headers={"User-Agent": self._settings.user_agent},
        )
        logger.info(LogTemplates.HTTP_CLIENT_CREATED, self._settings.timeout_seconds)
        return client

    async def fetch(self, url: str, params: dict[str, Any] | None = None) -> str:
        """GET ``url`` and return the response body as text.

        Raises:
            httpx.HTTPStatusError: The server answered with a non-2xx status.
            httpx.HTTPError: Any other transport failure.
        """
        logger.debug(LogTemplates.HTTP_GET, url, params)
        response = await self._client.get(url, params=params)
        response.raise_for_status()
        body = response.text
        logger.debug(LogTemplates.HTTP_RESPONSE, response.url, response.status_code, len(body))
        return body

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
            logger.info(LogTemplates.HTTP_CLIENT_CLOSED)

    async def __aenter__(self) -> HttpFetcher:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
