"""HTTP page fetcher built on ``httpx.AsyncClient``."""
from __future__ import annotations

import logging

import httpx

from denuo.domain.errors import FetchError
from denuo.domain.ports import PageFetcher

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/126.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "nl-BE,nl;q=0.9,fr-BE;q=0.8,fr;q=0.7,en;q=0.6",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


class HttpxPageFetcher(PageFetcher):
    """Fetch pages with a shared async client and browser-like headers.

    Non-2xx responses, transport errors and timeouts all surface as
    :class:`FetchError`. When no client is injected the fetcher owns one and
    closes it in :meth:`aclose`.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            headers=_DEFAULT_HEADERS,
            timeout=timeout,
            follow_redirects=True,
        )
        self._owns_client = client is None
        self._timeout = timeout
        self._log = logging.getLogger("denuo.scraper")

    async def fetch(self, url: str) -> str:
        self._log.info("GET %s", url)
        try:
            response = await self._client.get(
                url, headers=_DEFAULT_HEADERS, timeout=self._timeout
            )
        except httpx.TimeoutException as exc:
            raise FetchError(url, f"timed out after {self._timeout:g}s") from exc
        except httpx.HTTPError as exc:
            raise FetchError(url, str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            raise FetchError(
                url, f"HTTP {response.status_code} {response.reason_phrase}".strip()
            )
        self._log.debug("%s -> %d bytes", url, len(response.content))
        return response.text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["HttpxPageFetcher"]
