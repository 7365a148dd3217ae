"""Input validation with clear error messages for the browser's inputs."""

from __future__ import annotations

from typing import Any, Sequence

from .errors import InvalidBulkCount


def parse_bulk_count(raw: Any) -> int:
    """Parse the user-entered bulk-select count.

    Accepts ints and strings holding a whole number (surrounding whitespace
    is ignored). Anything else, including zero and negative numbers, raises
    ``InvalidBulkCount``.
    """
    if isinstance(raw, bool):
        raise InvalidBulkCount(raw)
    if isinstance(raw, int):
        count = raw
    elif isinstance(raw, str):
        text = raw.strip()
        try:
            count = int(text)
        except ValueError:
            raise InvalidBulkCount(raw) from None
    else:
        raise InvalidBulkCount(raw)
    if count <= 0:
        raise InvalidBulkCount(raw)
    return count


def clamp_bulk_count(count: int, total_count: int) -> int:
    """Clamp a bulk-select count to ``[1, total_count]``.

    With an empty dataset the result is 0: there is nothing to select.
    """
    if total_count <= 0:
        return 0
    return max(1, min(count, total_count))


def validate_page_index(page_index: Any) -> int:
    """Validate a 1-based page index."""
    if isinstance(page_index, bool) or not isinstance(page_index, int):
        raise TypeError(
            f"Page index must be an int, got {type(page_index).__name__}."
        )
    if page_index < 1:
        raise ValueError(f"Page index is 1-based, got {page_index}.")
    return page_index


def validate_page_size(page_size: Any, options: Sequence[int] | None = None) -> int:
    """Validate a page size, optionally against the allowed options."""
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise TypeError(
            f"Page size must be an int, got {type(page_size).__name__}."
        )
    if page_size < 1:
        raise ValueError(f"Page size must be positive, got {page_size}.")
    if options is not None and page_size not in options:
        raise ValueError(
            f"Unsupported page size {page_size}. Choose one of {list(options)}."
        )
    return page_size
