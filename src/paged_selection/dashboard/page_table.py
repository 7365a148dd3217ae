"""PageTable: checkbox Tabulator for the current page plus pager controls."""

from __future__ import annotations

import panel as pn

from ..core.frame import column_titles, indices_of, items_at, items_to_frame
from .controller import PageController


class PageTable:
    """Renders ``controller.items`` and reports checkbox changes back.

    The widget only ever holds one page. Its ``selection`` (row positions)
    is pushed from ``controller.visible_selection``; user changes to it are
    turned into the checked item subset and handed to
    ``controller.apply_checked``. Programmatic updates are not echoed back.
    """

    def __init__(self, controller: PageController) -> None:
        self.controller = controller
        self._syncing = False

        self.table = pn.widgets.Tabulator(
            items_to_frame(controller.items),
            selectable="checkbox",
            show_index=False,
            disabled=True,
            titles=column_titles(),
            hidden_columns=["id"],
            layout="fit_data_stretch",
            sizing_mode="stretch_width",
            min_height=300,
        )
        self._build_pager()

        self.table.param.watch(self._on_table_selection, "selection")
        controller.param.watch(self._on_items, "items")
        controller.param.watch(self._on_visible_selection, "visible_selection")
        controller.param.watch(self._on_loading, "loading")
        controller.param.watch(
            self._on_position, ["page", "page_size", "total_count"],
        )

    def _build_pager(self) -> None:
        c = self.controller
        self.prev_button = pn.widgets.Button(name="‹ Prev", width=70)
        self.next_button = pn.widgets.Button(name="Next ›", width=70)
        self.page_input = pn.widgets.IntInput(
            name="Page", value=c.page, start=1, width=80,
        )
        self.page_size_select = pn.widgets.Select(
            name="Rows per page", options=list(c.page_size_options),
            value=c.page_size, width=110,
        )
        self.page_label = pn.pane.Markdown(self._page_label_text(), margin=(18, 10, 0, 10))
        self.status = pn.pane.Markdown("", styles={"color": "#d93025"})

        self.prev_button.on_click(self._on_prev)
        self.next_button.on_click(self._on_next)
        self.page_input.param.watch(self._on_page_input, "value")
        self.page_size_select.param.watch(self._on_page_size_select, "value")
        c.param.watch(self._on_status, "status_text")
        self._update_pager_state()

    # --- Controller → widget ---

    def _on_items(self, event) -> None:
        self._syncing = True
        try:
            self.table.value = items_to_frame(event.new)
            self.table.selection = indices_of(event.new, self.controller.visible_selection)
        finally:
            self._syncing = False

    def _on_visible_selection(self, event) -> None:
        indices = indices_of(self.controller.items, event.new)
        if sorted(self.table.selection) == indices:
            return
        self._syncing = True
        try:
            self.table.selection = indices
        finally:
            self._syncing = False

    def _on_loading(self, event) -> None:
        self.table.loading = event.new

    def _on_status(self, event) -> None:
        self.status.object = event.new

    def _on_position(self, *events) -> None:
        self._syncing = True
        try:
            self.page_input.end = max(self.controller.page_count, self.controller.page)
            self.page_input.value = self.controller.page
            self.page_size_select.value = self.controller.page_size
        finally:
            self._syncing = False
        self._update_pager_state()

    def _update_pager_state(self) -> None:
        c = self.controller
        self.page_input.end = max(c.page_count, c.page)
        self.prev_button.disabled = c.page <= 1
        self.next_button.disabled = c.page >= c.page_count
        self.page_label.object = self._page_label_text()

    def _page_label_text(self) -> str:
        c = self.controller
        return f"Page {c.page} of {c.page_count} · {c.total_count:,} items"

    # --- Widget → controller ---

    def _on_table_selection(self, event) -> None:
        if self._syncing:
            return
        checked = items_at(self.controller.items, event.new)
        self.controller.apply_checked(checked)

    async def _on_prev(self, event) -> None:
        await self.controller.previous_page()

    async def _on_next(self, event) -> None:
        await self.controller.next_page()

    async def _on_page_input(self, event) -> None:
        if self._syncing or event.new is None or event.new == self.controller.page:
            return
        await self.controller.navigate(page=event.new)

    async def _on_page_size_select(self, event) -> None:
        if self._syncing or event.new == self.controller.page_size:
            return
        await self.controller.navigate(page_size=event.new)

    def build_panel(self) -> pn.Column:
        pager = pn.Row(
            self.prev_button,
            self.page_input,
            self.next_button,
            self.page_size_select,
            self.page_label,
            align="end",
        )
        return pn.Column(self.table, pager, self.status, sizing_mode="stretch_width")
