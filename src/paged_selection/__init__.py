"""paged-selection: browse a server-paginated dataset with a selection that persists across pages."""

from ._version import __version__
from .config import BrowserConfig
from .core.errors import FetchFailure, InvalidBulkCount, PagedSelectionError
from .core.item import Item, Page
from .core.selection_store import SelectionStore
from .source import ArticPageSource, InMemoryPageSource, PageSource, fetch_prefix


def explore(config=None, demo=False, port=0, show=True):
    """Launch the artwork browser in the browser.

    Parameters
    ----------
    config : BrowserConfig, optional
        Settings. Defaults to ``BrowserConfig.from_env()``.
    demo : bool
        Serve a synthetic in-memory dataset instead of the live API.
    port : int
        Port number. 0 = auto-assign.
    show : bool
        Whether to open the browser automatically.
    """
    from .dashboard.app import serve

    config = config or BrowserConfig.from_env()
    source_factory = InMemoryPageSource.demo if demo else None
    serve(config, source_factory=source_factory, port=port, show=show)


__all__ = [
    "__version__",
    "BrowserConfig",
    "Item",
    "Page",
    "SelectionStore",
    "PageSource",
    "ArticPageSource",
    "InMemoryPageSource",
    "fetch_prefix",
    "PagedSelectionError",
    "FetchFailure",
    "InvalidBulkCount",
    "explore",
]
