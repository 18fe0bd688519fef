"""Remote Document Source - fetches a manifest with a single HTTP GET."""

import logging
from typing import Optional

import httpx

from ...core.exceptions import FetchError
from .base_source import DocumentSource


class RemoteDocumentSource(DocumentSource):
    """Fetches the manifest over HTTP(S) using httpx.AsyncClient.

    One client is opened per load and closed once the response body has been
    consumed, on success and failure alike. Failures are never retried.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._url = url
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        # Hook for testing - inject a custom transport
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def load(self) -> bytes:
        logging.info(f"Fetching mount manifest: {self._url}")

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=self._follow_redirects,
                transport=self._transport,
            ) as client:
                response = await client.get(self._url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logging.error(f"HTTP request for {self._url} failed: {e}")
            raise FetchError(self._url, reason=str(e) or type(e).__name__) from e

        if not response.is_success:
            logging.error(
                f"HTTP error fetching {self._url}: "
                f"{response.status_code} {response.reason_phrase}"
            )
            raise FetchError(self._url, response.status_code, response.reason_phrase)

        logging.debug(f"Fetched {len(response.content)} bytes from {self._url}")
        return response.content

    def describe(self) -> str:
        return self._url
