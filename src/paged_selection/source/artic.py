"""ArticPageSource: pages of artworks from the Art Institute of Chicago API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx

from ..config import BrowserConfig
from ..core.errors import FetchFailure
from ..core.item import Item, Page, RECORD_FIELDS
from ..core.validation import validate_page_index, validate_page_size

logger = logging.getLogger(__name__)


class ArticPageSource:
    """Fetch artwork pages over HTTP.

    A plain ``fetch_page`` call opens a short-lived ``httpx.AsyncClient``,
    so the source holds no connection state. Use ``session()`` to keep one
    client open across the many fetches of a multi-page prefix. Pass
    ``transport`` to route requests elsewhere (e.g. ``httpx.MockTransport``).
    """

    # Largest ``limit`` the API accepts.
    MAX_PAGE_SIZE = 100

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        defaults = BrowserConfig()
        self.api_url = (api_url or defaults.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else defaults.request_timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: BrowserConfig) -> ArticPageSource:
        return cls(api_url=config.api_url, timeout=config.request_timeout)

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/artworks"

    def _params(self, page_index: int, page_size: int) -> dict[str, Any]:
        return {
            "page": page_index,
            "limit": page_size,
            "fields": ",".join(RECORD_FIELDS),
        }

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def fetch_page(self, page_index: int, page_size: int) -> Page:
        """Fetch one page. Raises ``FetchFailure`` on any failure."""
        async with self._new_client() as client:
            return await self._fetch_with(client, page_index, page_size)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[_ArticSession]:
        """Yield a fetcher whose ``fetch_page`` calls share one client."""
        async with self._new_client() as client:
            yield _ArticSession(self, client)

    async def _fetch_with(
        self, client: httpx.AsyncClient, page_index: int, page_size: int,
    ) -> Page:
        validate_page_index(page_index)
        validate_page_size(page_size)
        if page_size > self.MAX_PAGE_SIZE:
            raise ValueError(
                f"Page size {page_size} exceeds the API limit of {self.MAX_PAGE_SIZE}."
            )
        logger.debug("GET %s page=%d limit=%d", self.endpoint, page_index, page_size)
        try:
            response = await client.get(
                self.endpoint, params=self._params(page_index, page_size),
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise FetchFailure(
                page_index, f"HTTP {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            raise FetchFailure(page_index, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise FetchFailure(page_index, f"invalid JSON: {e}") from e
        return self._parse(payload, page_index, page_size)

    @staticmethod
    def _parse(payload: Any, page_index: int, page_size: int) -> Page:
        """Turn a ``{data: [...], pagination: {total}}`` payload into a Page."""
        try:
            records = payload["data"]
            total = int(payload["pagination"]["total"])
            items = tuple(Item.from_record(record) for record in records)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise FetchFailure(page_index, f"malformed payload: {e}") from e
        return Page(
            items=items,
            total_count=max(0, total),
            page_index=page_index,
            page_size=page_size,
        )


class _ArticSession:
    """``fetch_page`` bound to an open client; see ``ArticPageSource.session``."""

    def __init__(self, source: ArticPageSource, client: httpx.AsyncClient) -> None:
        self._source = source
        self._client = client

    async def fetch_page(self, page_index: int, page_size: int) -> Page:
        return await self._source._fetch_with(self._client, page_index, page_size)
