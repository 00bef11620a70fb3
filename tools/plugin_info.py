"""get_plugin_info: plugin directory metadata."""

import logging
from typing import Any

from mcp.types import CallToolResult, Tool, ToolAnnotations

from api import get_plugin_info
from models import PluginInfo, PluginInfoInput
from utils import error_result, json_result, truncate

logger = logging.getLogger(__name__)

NAME = "get_plugin_info"
MAX_DESCRIPTION_CHARS = 500
MAX_TAGS = 10

TOOL = Tool(
    name=NAME,
    description=(
        "Get detailed information about a WordPress plugin including ratings, "
        "downloads, and metadata"
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "plugin_slug": {
                "type": "string",
                "description": 'The WordPress plugin slug (e.g., "mathml-block")',
            },
        },
        "required": ["plugin_slug"],
    },
    annotations=ToolAnnotations(
        title="Get WordPress Plugin Info",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)


def format_plugin_info(info: PluginInfo) -> dict[str, Any]:
    return {
        "name": info.name,
        "version": info.version,
        "author": info.author,
        "rating": info.rating,
        "total_ratings": info.num_ratings,
        "downloads": info.downloaded,
        "support_threads": info.support_threads,
        "wordpress_version": {
            "requires": info.requires,
            "tested": info.tested,
        },
        "php_version": info.requires_php,
        "homepage": info.homepage,
        "description": truncate(info.description, MAX_DESCRIPTION_CHARS),
        "tags": info.tag_names(MAX_TAGS),
    }


async def handle_get_plugin_info(arguments: dict[str, Any] | None) -> CallToolResult:
    params = PluginInfoInput.model_validate(arguments or {})

    try:
        info = await get_plugin_info(params.plugin_slug)
        return json_result(format_plugin_info(info))
    except Exception as e:
        logger.warning(f"{NAME} failed for {params.plugin_slug}: {e}")
        return error_result(f"Error: {e}")
