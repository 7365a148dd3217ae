"""Page sources: where pages of items come from."""

from .base import PageSource, fetch_prefix
from .artic import ArticPageSource
from .memory import InMemoryPageSource

__all__ = [
    "PageSource",
    "fetch_prefix",
    "ArticPageSource",
    "InMemoryPageSource",
]
