"""BrowserApp: assembles the Panel template and serves one session per tab."""

from __future__ import annotations

import logging
from typing import Callable

import panel as pn

from ..config import BrowserConfig
from ..core.selection_store import SelectionStore
from ..source.artic import ArticPageSource
from ..source.base import PageSource
from .bulk_select import BulkSelectControl
from .controller import PageController
from .drawer import SelectionDrawer
from .page_table import PageTable

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Custom CSS
# ---------------------------------------------------------------------------

_APP_CSS = """
:root, :host {
  --design-primary-color: #1a73e8;
  --panel-primary-color: #1a73e8;
  --mdc-theme-primary: #1a73e8;
}

/* ---- Pill buttons ---- */
.bk-btn-primary {
  border-radius: 24px !important;
  background-color: #000 !important;
  border-color: #000 !important;
  color: #fff !important;
  font-size: 12px !important;
  text-transform: none !important;
}

/* ---- Outlined danger button ---- */
.bk-btn-danger {
  border-radius: 24px !important;
  background-color: transparent !important;
  border: 1px solid #d93025 !important;
  color: #d93025 !important;
  text-transform: none !important;
}
.bk-btn-danger:hover {
  background-color: rgba(217,48,37,0.08) !important;
}

/* ---- Compact header ---- */
.mdc-top-app-bar {
  background: #fafafa !important;
  box-shadow: none !important;
  border-bottom: 1px solid #f0f0f0 !important;
}
.mdc-top-app-bar__title {
  font-size: 15px !important;
  color: #202124 !important;
}

#sidebar {
  background: #f1f3f4 !important;
}
"""


class BrowserApp:
    """One browsing session.

    Owns the session's SelectionStore and threads it through the
    controller, the table and the drawer:

    - Main area: bulk-select control, page table, pager
    - Sidebar: selection drawer with clear button
    """

    def __init__(
        self,
        config: BrowserConfig | None = None,
        source: PageSource | None = None,
    ) -> None:
        self.config = config or BrowserConfig()
        self.store = SelectionStore()
        self.controller = PageController(
            self.store,
            source or ArticPageSource.from_config(self.config),
            self.config,
        )
        self.page_table = PageTable(self.controller)
        self.bulk_select = BulkSelectControl(self.controller)
        self.drawer = SelectionDrawer(self.controller)

    async def load_first_page(self) -> None:
        await self.controller.navigate(page=1)

    def build_template(self) -> pn.template.MaterialTemplate:
        """Build the Panel MaterialTemplate layout and schedule the first fetch."""
        template = pn.template.MaterialTemplate(
            title=self.config.title,
            sidebar=[self.drawer.build_panel()],
            sidebar_width=320,
            header_background="#fafafa",
            header_color="#202124",
        )
        template.main.append(
            pn.Column(
                self.bulk_select.build_panel(),
                self.page_table.build_panel(),
                sizing_mode="stretch_width",
            )
        )
        pn.state.onload(self.load_first_page)
        return template


def serve(
    config: BrowserConfig | None = None,
    source_factory: Callable[[], PageSource] | None = None,
    port: int = 0,
    show: bool = True,
    **kwargs,
) -> None:
    """Start the Panel server.

    Parameters
    ----------
    config : BrowserConfig, optional
        Settings; defaults to ``BrowserConfig()``.
    source_factory : callable, optional
        Returns the page source for a new session. Defaults to an
        ``ArticPageSource`` built from ``config``.
    port : int
        Port number. 0 = auto-assign.
    show : bool
        Whether to open the browser automatically.
    **kwargs
        Additional keyword arguments passed to pn.serve().
    """
    config = config or BrowserConfig()
    pn.extension("tabulator", sizing_mode="stretch_width")
    pn.config.raw_css.append(_APP_CSS)
    pn.config.loading_color = "#1a73e8"

    def new_session() -> pn.template.MaterialTemplate:
        source = source_factory() if source_factory is not None else None
        return BrowserApp(config, source).build_template()

    logger.info("Serving %s (API %s)", config.title, config.api_url)
    pn.serve(
        new_session,
        port=port or 0,
        show=show,
        title=config.title,
        **kwargs,
    )
