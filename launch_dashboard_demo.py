"""Launch the browser with a synthetic in-memory dataset (no network needed)."""

import logging

import paged_selection as ps

config = ps.BrowserConfig.from_env()
logging.basicConfig(level=config.log_level)

ps.explore(config, demo=True)
