"""HTML fetcher backed by httpx."""

from __future__ import annotations

import logging

import httpx

from .errors import FetchError
from .models import PageSource

logger = logging.getLogger(__name__)


class PageFetcher:
    """Retrieves the raw HTML of a page. Holds configuration only, no client state."""

    def __init__(
        self,
        timeout: float = 15.0,
        connect_timeout: float = 5.0,
        max_redirects: int = 5,
        user_agent: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._max_redirects = max_redirects
        self._headers = {"User-Agent": user_agent} if user_agent else {}
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict = {
            "timeout": self._timeout,
            "follow_redirects": True,
            "max_redirects": self._max_redirects,
            "headers": self._headers,
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def fetch(self, url: str) -> PageSource:
        """GET *url* and return its body text; any non-2xx status raises FetchError."""
        logger.debug("fetching page", extra={"url": url})
        try:
            async with self._client() as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("page fetch failed", extra={"url": url}, exc_info=True)
            reason = str(exc) or type(exc).__name__
            raise FetchError(url, f"Failed to fetch {url}: {reason}") from exc

        if not response.is_success:
            logger.warning(
                "page fetch returned non-success status",
                extra={"url": url, "status": response.status_code},
            )
            raise FetchError(
                url,
                f"Failed to fetch {url}: {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug(
            "page fetched",
            extra={"url": url, "status": response.status_code, "bytes": len(response.content)},
        )
        return PageSource(url=url, html=response.text, status_code=response.status_code)
