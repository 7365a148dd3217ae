"""Exception types raised at the edges of the selection core."""

from __future__ import annotations


class PagedSelectionError(Exception):
    """Base class for paged-selection errors."""


class FetchFailure(PagedSelectionError):
    """A page source could not deliver the requested page."""

    def __init__(self, page_index: int, reason: str) -> None:
        super().__init__(f"Failed to fetch page {page_index}: {reason}")
        self.page_index = page_index
        self.reason = reason


class InvalidBulkCount(PagedSelectionError, ValueError):
    """The bulk-select count is not a positive whole number."""

    def __init__(self, raw: object) -> None:
        super().__init__(
            f"Bulk select expects a positive whole number, got {raw!r}."
        )
        self.raw = raw
