"""Launch the artwork browser against the Art Institute of Chicago API."""

import logging

import paged_selection as ps

config = ps.BrowserConfig.from_env()
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

print(f"API: {config.api_url}")
print(f"Rows per page: {list(config.page_size_options)} (default {config.default_page_size})")
print("Launching dashboard...")

ps.explore(config)
