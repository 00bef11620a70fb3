"""search_plugins: keyword search over the plugin directory."""

import logging
from typing import Any

from mcp.types import CallToolResult, Tool, ToolAnnotations

from api import search_plugins
from models import SearchPluginsInput
from utils import error_result, json_result, text_result

logger = logging.getLogger(__name__)

NAME = "search_plugins"
MAX_TAGS = 5

TOOL = Tool(
    name=NAME,
    description="Search for WordPress plugins by keyword or name",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query for WordPress plugins",
            },
            "page": {
                "type": "number",
                "description": "Page number (default: 1)",
                "minimum": 1,
                "default": 1,
            },
            "per_page": {
                "type": "number",
                "description": "Results per page (default: 10)",
                "minimum": 1,
                "maximum": 50,
                "default": 10,
            },
        },
        "required": ["query"],
    },
    annotations=ToolAnnotations(
        title="Search WordPress Plugins",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)


def _tag_names(tags: Any, limit: int) -> list[str]:
    if isinstance(tags, dict):
        return list(tags)[:limit]
    if isinstance(tags, list):
        return [str(tag) for tag in tags][:limit]
    return []


def format_plugin(plugin: dict[str, Any]) -> dict[str, Any]:
    return {
        "name": plugin.get("name"),
        "slug": plugin.get("slug"),
        "version": plugin.get("version"),
        "author": plugin.get("author"),
        "rating": plugin.get("rating"),
        "num_ratings": plugin.get("num_ratings"),
        "downloaded": plugin.get("downloaded"),
        "last_updated": plugin.get("last_updated"),
        "short_description": plugin.get("short_description"),
        "homepage": plugin.get("homepage"),
        "tags": _tag_names(plugin.get("tags"), MAX_TAGS),
    }


async def handle_search_plugins(arguments: dict[str, Any] | None) -> CallToolResult:
    params = SearchPluginsInput.model_validate(arguments or {})

    try:
        results = await search_plugins(params.query, params.page, params.per_page)
        plugins = results.get("plugins") or []

        if not plugins:
            return text_result(f'No plugins found for query: "{params.query}"')

        info = results.get("info") or {}
        return json_result(
            {
                "query": params.query,
                "total_results": info.get("results") or 0,
                "page": info.get("page") or params.page,
                "pages": info.get("pages") or 1,
                "plugins": [format_plugin(plugin) for plugin in plugins],
            }
        )
    except Exception as e:
        logger.warning(f"{NAME} failed for {params.query!r}: {e}")
        return error_result(f"Error: {e}")
