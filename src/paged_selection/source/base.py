"""PageSource protocol and the multi-page prefix helper."""

from __future__ import annotations

import contextlib
import logging
import math
from typing import AsyncContextManager, Protocol, runtime_checkable

from ..core.item import Item, Page
from ..core.validation import validate_page_size

logger = logging.getLogger(__name__)


@runtime_checkable
class PageSource(Protocol):
    """Anything that can fetch one page of the dataset.

    ``fetch_page`` is stateless per call. It returns the page's items in
    display order plus the dataset's total count, and raises
    ``FetchFailure`` for any failure.

    A source may also offer ``session()``, an async context manager
    yielding an object with the same ``fetch_page``, to share connection
    state across the fetches of one multi-page prefix.
    """

    async def fetch_page(self, page_index: int, page_size: int) -> Page:
        ...


def _session(source: PageSource) -> AsyncContextManager:
    session = getattr(source, "session", None)
    if session is None:
        return contextlib.nullcontext(source)
    return session()


async def fetch_prefix(
    source: PageSource,
    n: int,
    page_size: int,
    cached: Page | None = None,
) -> list[Item]:
    """Return the first ``n`` items of the dataset, fetching as many pages as needed.

    Pages ``1..ceil(n / page_size)`` are fetched one after another, inside
    one ``session()`` when the source offers it. ``page_size`` is the fetch
    size and need not match the table's rows per page; larger pages mean
    fewer requests.

    ``cached`` (usually the page already on screen) is used instead of a
    fetch when it lines up: either it is page 1 and already holds ``n``
    items, or it has the same index and size as a page to fetch. Fetching
    stops early when a page comes back short, i.e. the dataset ended.
    ``FetchFailure`` propagates.
    """
    validate_page_size(page_size)
    if n <= 0:
        return []
    if cached is not None and cached.page_index == 1 and len(cached) >= n:
        return list(cached.items[:n])

    n_pages = math.ceil(n / page_size)
    prefix: list[Item] = []
    async with _session(source) as fetcher:
        for page_index in range(1, n_pages + 1):
            if (
                cached is not None
                and cached.page_index == page_index
                and cached.page_size == page_size
            ):
                page = cached
            else:
                page = await fetcher.fetch_page(page_index, page_size)
            prefix.extend(page.items)
            if len(prefix) >= n or len(page) < page_size:
                break
    logger.debug(
        "Assembled prefix of %d items (asked for %d, %d per fetch)",
        min(len(prefix), n), n, page_size,
    )
    return prefix[:n]
