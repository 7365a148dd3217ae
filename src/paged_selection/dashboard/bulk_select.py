"""BulkSelectControl: "select the first N rows" input and submit button."""

from __future__ import annotations

import panel as pn

from .controller import PageController


class BulkSelectControl:
    """Text input plus submit button driving ``controller.bulk_select``.

    The input is cleared only when the bulk select went through; rejected
    input stays in place so it can be corrected. The submit button
    is disabled while a bulk select is running.
    """

    def __init__(self, controller: PageController) -> None:
        self.controller = controller
        self.count_input = pn.widgets.TextInput(
            name="Select first N rows",
            placeholder="Select rows...",
            width=140,
        )
        self.submit_button = pn.widgets.Button(
            name="submit", button_type="primary", width=80,
        )
        self.submit_button.on_click(self._on_submit)
        controller.param.watch(self._on_running, "bulk_selecting")

    def _on_running(self, event) -> None:
        self.submit_button.disabled = event.new

    async def _on_submit(self, event) -> None:
        await self.submit(self.count_input.value)

    async def submit(self, raw_count: str) -> bool:
        ok = await self.controller.bulk_select(raw_count)
        if ok:
            self.count_input.value = ""
        return ok

    def build_panel(self) -> pn.Row:
        return pn.Row(self.count_input, self.submit_button, align="end")
