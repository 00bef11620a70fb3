"""Runtime configuration for the WordPress Support Forum MCP server."""

import os

from pydantic import BaseModel, ConfigDict, Field

SERVER_NAME = "wp-support-forum-mcp-server"
SERVER_VERSION = "1.0.0"
USER_AGENT = f"WP-Support-Forum-MCP-Server/{SERVER_VERSION}"

DEFAULT_PLUGIN_INFO_URL = "https://api.wordpress.org/plugins/info/1.0"
DEFAULT_PLUGIN_SEARCH_URL = "https://api.wordpress.org/plugins/info/1.1/"
DEFAULT_SUPPORT_FEED_URL = "https://wordpress.org/support/plugin"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseModel):
    """Endpoints and limits, resolved from the environment."""

    model_config = ConfigDict(frozen=True)

    plugin_info_url: str = DEFAULT_PLUGIN_INFO_URL
    plugin_search_url: str = DEFAULT_PLUGIN_SEARCH_URL
    support_feed_url: str = DEFAULT_SUPPORT_FEED_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Build settings from ``WP_*`` environment variables.

    Read on every call so a ``.env`` file loaded at startup, or a test
    patching the environment, is always honoured.
    """
    return Settings(
        plugin_info_url=os.getenv("WP_PLUGIN_INFO_URL", DEFAULT_PLUGIN_INFO_URL).rstrip("/"),
        plugin_search_url=os.getenv("WP_PLUGIN_SEARCH_URL", DEFAULT_PLUGIN_SEARCH_URL),
        support_feed_url=os.getenv("WP_SUPPORT_FEED_URL", DEFAULT_SUPPORT_FEED_URL).rstrip("/"),
        timeout=float(os.getenv("WP_API_TIMEOUT", DEFAULT_TIMEOUT)),
        log_level=os.getenv("WP_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
