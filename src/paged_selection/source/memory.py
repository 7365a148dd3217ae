"""InMemoryPageSource: serves pages from a list held in memory."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from ..core.errors import FetchFailure
from ..core.item import Item, Page
from ..core.validation import validate_page_index, validate_page_size


class InMemoryPageSource:
    """Page source over an in-memory item list.

    Used by the tests and by the offline demo. ``fail_pages`` makes
    fetches of those page indices raise ``FetchFailure``; ``delays`` maps
    a page index to seconds to sleep before answering.
    """

    def __init__(
        self,
        items: Sequence[Item],
        fail_pages: Sequence[int] = (),
        delays: dict[int, float] | None = None,
    ) -> None:
        self._items = tuple(items)
        self.fail_pages = set(fail_pages)
        self.delays = dict(delays or {})
        self.calls: list[tuple[int, int]] = []
        self.sessions = 0

    @classmethod
    def demo(cls, n: int = 125) -> InMemoryPageSource:
        """A source with ``n`` synthetic artworks."""
        return cls([
            Item(
                id=i,
                title=f"Untitled {i}",
                place_of_origin="Chicago",
                artist_display=f"Artist {i % 7 + 1}",
                inscriptions="",
                date_start=1850 + i,
                date_end=1851 + i,
            )
            for i in range(1, n + 1)
        ])

    @property
    def total_count(self) -> int:
        return len(self._items)

    async def fetch_page(self, page_index: int, page_size: int) -> Page:
        validate_page_index(page_index)
        validate_page_size(page_size)
        self.calls.append((page_index, page_size))
        delay = self.delays.get(page_index)
        if delay:
            await asyncio.sleep(delay)
        if page_index in self.fail_pages:
            raise FetchFailure(page_index, "simulated network error")
        start = (page_index - 1) * page_size
        return Page(
            items=self._items[start:start + page_size],
            total_count=len(self._items),
            page_index=page_index,
            page_size=page_size,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[InMemoryPageSource]:
        self.sessions += 1
        yield self
