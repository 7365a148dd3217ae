"""BrowserConfig: runtime settings for the artwork browser."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping


ENV_PREFIX = "PAGED_SELECTION_"

DEFAULT_API_URL = "https://api.artic.edu/api/v1"
DEFAULT_PAGE_SIZE_OPTIONS = (10, 20, 50)


@dataclass(frozen=True)
class BrowserConfig:
    """Settings shared by the page source, controller and dashboard.

    Parameters
    ----------
    api_url : str
        Base URL of the artworks API (no trailing slash needed).
    page_size_options : tuple of int
        Rows-per-page choices offered by the table.
    default_page_size : int
        Initial rows per page. Must be one of ``page_size_options``.
    request_timeout : float
        HTTP timeout in seconds for one page fetch.
    log_level : str
        Level name passed to ``logging.basicConfig`` by the launcher.
    title : str
        Dashboard title.
    prefix_page_size : int
        Page size used when fetching the first N items for a bulk select,
        independent of the table's rows per page. The artworks API caps
        ``limit`` at 100.
    max_bulk_select : int
        Upper bound on N for a bulk select. The artworks API refuses to
        page past its first 10,000 results.
    """

    api_url: str = DEFAULT_API_URL
    page_size_options: tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS
    default_page_size: int = 10
    request_timeout: float = 10.0
    log_level: str = "INFO"
    title: str = "Artworks (Persistent Selection)"
    prefix_page_size: int = 100
    max_bulk_select: int = 10_000

    def __post_init__(self) -> None:
        if not self.page_size_options:
            raise ValueError("page_size_options must not be empty.")
        if any(size < 1 for size in self.page_size_options):
            raise ValueError(
                f"Page sizes must be positive, got {list(self.page_size_options)}."
            )
        if self.default_page_size not in self.page_size_options:
            raise ValueError(
                f"default_page_size {self.default_page_size} is not one of "
                f"{list(self.page_size_options)}."
            )
        if self.request_timeout <= 0:
            raise ValueError(
                f"request_timeout must be positive, got {self.request_timeout}."
            )
        if self.prefix_page_size < 1:
            raise ValueError(
                f"prefix_page_size must be positive, got {self.prefix_page_size}."
            )
        if self.max_bulk_select < 1:
            raise ValueError(
                f"max_bulk_select must be positive, got {self.max_bulk_select}."
            )
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BrowserConfig:
        """Build a config, overriding defaults from ``PAGED_SELECTION_*`` variables.

        Recognized variables: ``API_URL``, ``PAGE_SIZES`` (comma-separated),
        ``PAGE_SIZE``, ``TIMEOUT``, ``LOG_LEVEL``, ``TITLE``, ``PREFIX_PAGE_SIZE``,
        ``MAX_BULK_SELECT``.
        """
        env = os.environ if environ is None else environ
        overrides: dict = {}

        def get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            return value.strip() if value and value.strip() else None

        if (value := get("API_URL")) is not None:
            overrides["api_url"] = value
        if (value := get("PAGE_SIZES")) is not None:
            overrides["page_size_options"] = tuple(
                _parse_int(part, "PAGE_SIZES") for part in value.split(",") if part.strip()
            )
        if (value := get("PAGE_SIZE")) is not None:
            overrides["default_page_size"] = _parse_int(value, "PAGE_SIZE")
        elif "page_size_options" in overrides:
            overrides["default_page_size"] = overrides["page_size_options"][0]
        if (value := get("TIMEOUT")) is not None:
            try:
                overrides["request_timeout"] = float(value)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}TIMEOUT must be a number, got '{value}'."
                ) from None
        if (value := get("LOG_LEVEL")) is not None:
            overrides["log_level"] = value
        if (value := get("TITLE")) is not None:
            overrides["title"] = value
        if (value := get("PREFIX_PAGE_SIZE")) is not None:
            overrides["prefix_page_size"] = _parse_int(value, "PREFIX_PAGE_SIZE")
        if (value := get("MAX_BULK_SELECT")) is not None:
            overrides["max_bulk_select"] = _parse_int(value, "MAX_BULK_SELECT")
        return replace(cls(), **overrides) if overrides else cls()


def _parse_int(text: str, name: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(
            f"{ENV_PREFIX}{name} must contain whole numbers, got '{text}'."
        ) from None
