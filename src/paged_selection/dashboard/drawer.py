"""SelectionDrawer: lists every selected item across all pages."""

from __future__ import annotations

import html

import panel as pn

from ..core.item import Item
from .controller import PageController

EMPTY_TEXT = "No artworks selected."
MAX_RENDERED_ITEMS = 200

_DRAWER_CSS = """
.ps-selected { list-style: none; padding: 0; margin: 0; }
.ps-selected li {
  padding: 6px 8px;
  margin-bottom: 6px;
  border: 1px solid #e0e0e0;
  border-radius: 6px;
  background: #fff;
}
.ps-selected .ps-title { font-weight: 600; }
.ps-selected .ps-artist { font-size: 12px; color: #5f6368; }
.ps-empty, .ps-more { font-size: 13px; color: #5f6368; }
"""


def render_selected_html(items: list[Item], limit: int = MAX_RENDERED_ITEMS) -> str:
    """HTML for the drawer body: one entry per item, or the empty text.

    At most ``limit`` entries are rendered; the rest are summarized as a
    count so a large bulk select does not ship a huge list to the browser.
    """
    if not items:
        return f'<p class="ps-empty">{EMPTY_TEXT}</p>'
    rows = "".join(
        "<li>"
        f'<div class="ps-title">{html.escape(item.title or f"#{item.id}")}</div>'
        f'<div class="ps-artist">{html.escape(item.artist_display)}</div>'
        "</li>"
        for item in items[:limit]
    )
    hidden = len(items) - limit
    more = f'<p class="ps-more">… and {hidden:,} more</p>' if hidden > 0 else ""
    return f'<ul class="ps-selected">{rows}</ul>{more}'


class SelectionDrawer:
    """Read-only view of the selection store with a clear button.

    Re-renders whenever the store reports a change. The clear button is
    only visible while something is selected.
    """

    def __init__(self, controller: PageController) -> None:
        self.controller = controller
        self.heading = pn.pane.Markdown("")
        self.body = pn.pane.HTML("", stylesheets=[_DRAWER_CSS], sizing_mode="stretch_width")
        self.clear_button = pn.widgets.Button(
            name="Clear Selection", button_type="danger", visible=False,
        )
        self.clear_button.on_click(self._on_clear)
        controller.store.on_change(self._on_selection_change)
        self._render(controller.store.selected_items())

    def _on_selection_change(self, items: list[Item]) -> None:
        self._render(items)

    def _render(self, items: list[Item]) -> None:
        self.heading.object = f"### Selected Artworks ({len(items)})"
        self.body.object = render_selected_html(items)
        self.clear_button.visible = bool(items)

    def _on_clear(self, event) -> None:
        self.controller.clear_selection()

    def build_panel(self) -> pn.Column:
        return pn.Column(
            self.heading,
            self.body,
            self.clear_button,
            sizing_mode="stretch_width",
            scroll=True,
        )
