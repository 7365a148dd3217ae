"""PageController: fetch a page, feed the selection store, expose render state."""

from __future__ import annotations

import logging
import math

import param

from ..config import BrowserConfig
from ..core.errors import FetchFailure, InvalidBulkCount
from ..core.item import Item, Page
from ..core.selection_store import SelectionStore
from ..core.validation import (
    clamp_bulk_count,
    parse_bulk_count,
    validate_page_index,
    validate_page_size,
)
from ..source.base import PageSource, fetch_prefix

logger = logging.getLogger(__name__)


class PageController(param.Parameterized):
    """Reactive state for one browsing session.

    Owns the current page and its position; the selection itself lives in
    the ``SelectionStore`` passed in, so the drawer can share it. Widgets
    watch ``items`` and ``visible_selection`` to render the table and its
    checkboxes.

    All handlers run on the session's event loop. Only the page fetch
    suspends; a fetch that completes after a newer navigation was
    requested is dropped.
    """

    # --- Position ---
    page = param.Integer(default=1, bounds=(1, None))
    page_size = param.Integer(default=10, bounds=(1, None))
    page_size_options = param.List(default=[10, 20, 50], item_type=int)

    # --- Current page ---
    items = param.List(default=[], doc="Items of the currently loaded page")
    total_count = param.Integer(default=0, bounds=(0, None))
    visible_selection = param.List(default=[], doc="Selected items of the current page")

    # --- Status ---
    loading = param.Boolean(default=False)
    status_text = param.String(default="")
    bulk_selecting = param.Boolean(default=False)

    def __init__(
        self,
        store: SelectionStore,
        source: PageSource,
        config: BrowserConfig | None = None,
        **params,
    ) -> None:
        config = config or BrowserConfig()
        params.setdefault("page_size_options", list(config.page_size_options))
        params.setdefault("page_size", config.default_page_size)
        super().__init__(**params)
        self.config = config
        self.store = store
        self.source = source
        self._current: Page | None = None
        self._request_seq = 0
        self._navigating = False

    @property
    def current_page(self) -> Page | None:
        """The last successfully fetched page, or None before the first fetch."""
        return self._current

    @property
    def page_count(self) -> int:
        return self._page_count_for(self.page_size)

    def _page_count_for(self, page_size: int) -> int:
        return max(1, math.ceil(self.total_count / page_size))

    # --- Navigation ---

    async def navigate(self, page: int | None = None, page_size: int | None = None) -> bool:
        """Fetch a page and make it current.

        Parameters
        ----------
        page : int, optional
            1-based page to show. Defaults to the current page, or, when
            only ``page_size`` changes, to the page that keeps the first
            visible row on screen.
        page_size : int, optional
            New rows per page; must be one of ``page_size_options``.

        Returns True when the fetched page was applied. A failed fetch is
        logged and reported in ``status_text``, leaving the previous page
        and the selection as they were.
        """
        target_size = self.page_size
        if page_size is not None:
            target_size = validate_page_size(page_size, self.page_size_options)
        if page is not None:
            target_page = validate_page_index(page)
        elif target_size != self.page_size:
            target_page = (self.page - 1) * self.page_size // target_size + 1
        else:
            target_page = self.page
        if self.total_count:
            target_page = min(target_page, self._page_count_for(target_size))

        self._request_seq += 1
        request = self._request_seq
        self._navigating = True
        self.param.update(page=target_page, page_size=target_size, loading=True)

        try:
            fetched = await self.source.fetch_page(target_page, target_size)
        except FetchFailure as e:
            if request != self._request_seq:
                logger.debug("Ignoring stale failure for page %d: %s", target_page, e)
                return False
            logger.warning("%s", e)
            self._restore_position()
            self.status_text = str(e)
            return False
        finally:
            if request == self._request_seq:
                self._navigating = False
                self.loading = self.bulk_selecting

        if request != self._request_seq:
            logger.debug("Ignoring stale response for page %d", target_page)
            return False

        self._current = fetched
        self.param.update(
            items=list(fetched.items),
            total_count=fetched.total_count,
            visible_selection=self.store.visible_selection(fetched.items),
            status_text="",
        )
        logger.debug(
            "Loaded page %d (%d items, %d total)",
            target_page, len(fetched), fetched.total_count,
        )
        return True

    def _restore_position(self) -> None:
        # Keep the pager consistent with the page that is still displayed.
        if self._current is not None:
            self.param.update(
                page=self._current.page_index,
                page_size=self._current.page_size,
            )

    async def next_page(self) -> bool:
        if self.page >= self.page_count:
            return False
        return await self.navigate(page=self.page + 1)

    async def previous_page(self) -> bool:
        if self.page <= 1:
            return False
        return await self.navigate(page=self.page - 1)

    # --- Selection ---

    def apply_checked(self, checked_items: list[Item]) -> None:
        """Merge the table's checked rows into the selection."""
        self.store.reconcile(self.items, checked_items)
        self.refresh_visible_selection()

    def refresh_visible_selection(self) -> None:
        self.visible_selection = self.store.visible_selection(self.items)

    async def bulk_select(self, raw_count: object) -> bool:
        """Select the first N items of the dataset, across pages if needed.

        ``raw_count`` is the user's input. Invalid input is rejected without
        touching the selection; N is clamped to the dataset size and to
        ``config.max_bulk_select``. The prefix is fetched in pages of
        ``config.prefix_page_size``, independent of the table's rows per
        page. ``loading`` and ``bulk_selecting`` are set while it runs, and
        a second bulk select is refused until the first one finishes.
        Returns True when items were selected.
        """
        if self.bulk_selecting:
            self.status_text = "A bulk select is already running."
            return False
        try:
            count = parse_bulk_count(raw_count)
        except InvalidBulkCount as e:
            logger.info("Rejected bulk select input %r", raw_count)
            self.status_text = str(e)
            return False

        capped = min(count, self.config.max_bulk_select)
        n = clamp_bulk_count(capped, self.total_count)
        if n == 0:
            self.status_text = "Nothing to select yet."
            return False

        self.param.update(
            bulk_selecting=True,
            loading=True,
            status_text=f"Selecting the first {n:,} items...",
        )
        try:
            prefix = await fetch_prefix(
                self.source, n, self.config.prefix_page_size, cached=self._current,
            )
        except FetchFailure as e:
            logger.warning("Bulk select aborted: %s", e)
            self.status_text = str(e)
            return False
        finally:
            self.param.update(bulk_selecting=False, loading=self._navigating)

        self.store.bulk_select_first_n(prefix, n)
        self.refresh_visible_selection()
        logger.info("Bulk selected the first %d items", len(prefix))
        status = f"Selected the first {len(prefix):,} items."
        if capped < count:
            status += f" Bulk select is limited to {self.config.max_bulk_select:,} items."
        self.status_text = status
        return True

    def clear_selection(self) -> None:
        self.store.clear()
        self.refresh_visible_selection()
        self.status_text = ""
