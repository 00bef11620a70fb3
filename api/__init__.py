"""
WordPress.org API Integrations.

This module provides async fetchers for the public WordPress.org data the
server exposes. No API key is required for any of them.

Available Sources:
─────────────────────────────────────────────────────────────────────────────
PLUGIN DIRECTORY
    wordpress        Plugin metadata (info/1.0) and search (info/1.1)

SUPPORT FORUMS
    support_feed     Per-plugin support-forum RSS feed

Configuration:
─────────────────────────────────────────────────────────────────────────────
Endpoints can be overridden in environment variables or a .env file:

    WP_PLUGIN_INFO_URL    default https://api.wordpress.org/plugins/info/1.0
    WP_PLUGIN_SEARCH_URL  default https://api.wordpress.org/plugins/info/1.1/
    WP_SUPPORT_FEED_URL   default https://wordpress.org/support/plugin
    WP_API_TIMEOUT        request timeout in seconds (default 30)
"""

# ══════════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════════

from dotenv import load_dotenv

load_dotenv()

# ══════════════════════════════════════════════════════════════════════════════
# Fetchers
# ══════════════════════════════════════════════════════════════════════════════

from api.errors import (
    FeedNotFoundError,
    FeedStructureError,
    FetchError,
    NotFoundError,
    PluginNotFoundError,
    WordPressAPIError,
)
from api.support_feed import (
    get_feed_for_plugin,
    get_recent_topics,
    parse_feed,
)
from api.wordpress import (
    get_plugin_info,
    search_plugins,
)

# ══════════════════════════════════════════════════════════════════════════════
# Public API
# ══════════════════════════════════════════════════════════════════════════════

__all__ = [
    # Plugin directory
    "get_plugin_info",
    "search_plugins",
    # Support forums
    "get_feed_for_plugin",
    "get_recent_topics",
    "parse_feed",
    # Errors
    "WordPressAPIError",
    "NotFoundError",
    "PluginNotFoundError",
    "FeedNotFoundError",
    "FetchError",
    "FeedStructureError",
]
