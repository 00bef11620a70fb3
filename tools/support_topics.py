"""get_support_topics: recent topics from a plugin's support forum."""

import logging
from typing import Any

from mcp.types import CallToolResult, Tool, ToolAnnotations

from api import get_recent_topics
from models import SupportTopic, SupportTopicsInput
from utils import error_result, json_result, text_result, truncate

logger = logging.getLogger(__name__)

NAME = "get_support_topics"
MAX_DESCRIPTION_CHARS = 200

TOOL = Tool(
    name=NAME,
    description=(
        "Get recent support topics and issues for a WordPress plugin from the "
        "support forum RSS feed"
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "plugin_slug": {
                "type": "string",
                "description": 'The WordPress plugin slug (e.g., "mathml-block")',
            },
            "limit": {
                "type": "number",
                "description": "Number of topics to retrieve (default: 20)",
                "minimum": 1,
                "maximum": 100,
                "default": 20,
            },
        },
        "required": ["plugin_slug"],
    },
    annotations=ToolAnnotations(
        title="Get Plugin Support Topics",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)


def format_topic(topic: SupportTopic) -> dict[str, Any]:
    return {
        "title": topic.title,
        "link": topic.link,
        "date": topic.pub_date,
        "description": truncate(topic.description, MAX_DESCRIPTION_CHARS),
        "author": topic.author,
    }


async def handle_get_support_topics(arguments: dict[str, Any] | None) -> CallToolResult:
    params = SupportTopicsInput.model_validate(arguments or {})

    try:
        topics = await get_recent_topics(params.plugin_slug, params.limit)

        if not topics:
            return text_result(f"No support topics found for plugin '{params.plugin_slug}'")

        return json_result(
            {
                "plugin": params.plugin_slug,
                "total_topics": len(topics),
                "topics": [format_topic(topic) for topic in topics],
            }
        )
    except Exception as e:
        logger.warning(f"{NAME} failed for {params.plugin_slug}: {e}")
        return error_result(f"Error: {e}")
