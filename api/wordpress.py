"""
WordPress.org Plugin Directory API.

Fetch metadata for a single plugin and search the plugin directory.

API: https://codex.wordpress.org/WordPress.org_API
Rate Limits: None documented
"""

import logging
from typing import Any

import httpx

from api.errors import FetchError, PluginNotFoundError
from models import PluginInfo, get_settings

__all__ = ["get_plugin_info", "search_plugins", "SEARCH_FIELDS"]

logger = logging.getLogger(__name__)

# ══════════════════════════════════════════════════════════════════════════════
# Configuration
# ══════════════════════════════════════════════════════════════════════════════

# Fields requested from query_plugins; sections and descriptions are heavy
SEARCH_FIELDS: dict[str, bool] = {
    "short_description": True,
    "description": False,
    "sections": False,
    "tested": True,
    "requires": True,
    "rating": True,
    "ratings": True,
    "downloaded": True,
    "downloadlink": False,
    "last_updated": True,
    "homepage": True,
    "tags": True,
    "author": True,
}

# ══════════════════════════════════════════════════════════════════════════════
# Plugin Info
# ══════════════════════════════════════════════════════════════════════════════


async def get_plugin_info(plugin_slug: str) -> PluginInfo:
    """
    Fetch metadata for one plugin.

    Args:
        plugin_slug: Plugin slug, e.g. "mathml-block"

    Returns:
        Parsed PluginInfo

    Raises:
        PluginNotFoundError: The directory has no such plugin
        FetchError: Any other transport, status or decoding failure
    """
    settings = get_settings()
    url = f"{settings.plugin_info_url}/{plugin_slug}.json"
    logger.debug(f"Fetching plugin info: {url}")

    try:
        async with httpx.AsyncClient(timeout=settings.timeout) as client:
            response = await client.get(url)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 404:
            raise PluginNotFoundError(plugin_slug) from e
        logger.warning(f"Plugin info request failed for {plugin_slug}: {e}")
        raise FetchError(f"Failed to fetch plugin info: {e}") from e
    except Exception as e:
        logger.warning(f"Plugin info request failed for {plugin_slug}: {e}")
        raise FetchError(f"Failed to fetch plugin info: {e}") from e

    # Unknown slugs can also come back as 200 with null or an error object
    if not isinstance(data, dict) or "error" in data:
        raise PluginNotFoundError(plugin_slug)

    return PluginInfo.model_validate(data)


# ══════════════════════════════════════════════════════════════════════════════
# Plugin Search
# ══════════════════════════════════════════════════════════════════════════════


def _build_search_params(query: str, page: int, per_page: int) -> dict[str, Any]:
    """Flatten a query_plugins request into PHP-style bracketed parameters."""
    params: dict[str, Any] = {
        "action": "query_plugins",
        "request[search]": query,
        "request[page]": page,
        "request[per_page]": per_page,
    }
    for field, enabled in SEARCH_FIELDS.items():
        params[f"request[fields][{field}]"] = int(enabled)
    return params


async def search_plugins(query: str, page: int = 1, per_page: int = 10) -> dict[str, Any]:
    """
    Search the plugin directory.

    Args:
        query: Free-text search
        page: 1-based result page
        per_page: Results per page

    Returns:
        Decoded response: ``{"info": {...}, "plugins": [...]}``

    Raises:
        FetchError: Any failure, 404 included

    Example:
        >>> results = await search_plugins("math", per_page=5)
    """
    settings = get_settings()
    params = _build_search_params(query, page, per_page)
    logger.debug(f"Searching plugins: query={query!r} page={page} per_page={per_page}")

    try:
        async with httpx.AsyncClient(timeout=settings.timeout) as client:
            response = await client.get(settings.plugin_search_url, params=params)
            response.raise_for_status()
            data = response.json()
    except Exception as e:
        logger.warning(f"Plugin search failed for {query!r}: {e}")
        raise FetchError(f"Failed to search plugins: {e}") from e

    if not isinstance(data, dict):
        raise FetchError("Failed to search plugins: unexpected response body")

    return data
