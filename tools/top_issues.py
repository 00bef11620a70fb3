"""analyze_top_issues: keyword and category summary of support topics."""

import logging
from typing import Any

from mcp.types import CallToolResult, Tool, ToolAnnotations

from api import get_recent_topics
from core import analyze_topics, round_half_up
from models import TopIssuesAnalysis, TopIssuesInput
from utils import error_result, json_result, text_result, truncate

logger = logging.getLogger(__name__)

NAME = "analyze_top_issues"
MAX_SUMMARY_KEYWORDS = 10
MAX_SAMPLE_TOPICS = 3
MAX_RECENT_ISSUES = 5
MAX_DESCRIPTION_CHARS = 150

TOOL = Tool(
    name=NAME,
    description=(
        "Analyze support topics to identify the most common issues and problems "
        "reported by users for a WordPress plugin"
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "plugin_slug": {
                "type": "string",
                "description": 'The WordPress plugin slug (e.g., "mathml-block")',
            },
            "max_topics": {
                "type": "number",
                "description": "Maximum number of topics to analyze (default: 50)",
                "minimum": 10,
                "maximum": 200,
                "default": 50,
            },
        },
        "required": ["plugin_slug"],
    },
    annotations=ToolAnnotations(
        title="Analyze Top Plugin Issues",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)


def _share(count: int, total: int) -> int:
    if total <= 0:
        return 0
    return round_half_up(count / total * 100)


def summarize_analysis(analysis: TopIssuesAnalysis) -> dict[str, Any]:
    """Trim a full analysis down to the response payload."""
    total = analysis.total_topics
    return {
        "plugin": analysis.plugin,
        "total_topics_analyzed": total,
        "top_keywords": [
            stat.model_dump() for stat in analysis.common_keywords[:MAX_SUMMARY_KEYWORDS]
        ],
        "issue_categories": [
            {
                "category": category.category,
                "count": category.count,
                "percentage": _share(category.count, total),
                "sample_topics": [
                    {"title": topic.title, "link": topic.link, "date": topic.pub_date}
                    for topic in category.topics[:MAX_SAMPLE_TOPICS]
                ],
            }
            for category in analysis.issue_categories
        ],
        "recent_issues": [
            {
                "title": issue.title,
                "link": issue.link,
                "date": issue.pub_date,
                "description": truncate(issue.description, MAX_DESCRIPTION_CHARS),
            }
            for issue in analysis.recent_issues[:MAX_RECENT_ISSUES]
        ],
    }


async def handle_analyze_top_issues(arguments: dict[str, Any] | None) -> CallToolResult:
    params = TopIssuesInput.model_validate(arguments or {})

    try:
        topics = await get_recent_topics(params.plugin_slug, params.max_topics)

        if not topics:
            return text_result(
                f"No support topics found for analysis of plugin '{params.plugin_slug}'"
            )

        analysis = analyze_topics(params.plugin_slug, topics)
        logger.debug(
            f"Analyzed {analysis.total_topics} topics for {params.plugin_slug}: "
            f"{len(analysis.issue_categories)} categories"
        )
        return json_result(summarize_analysis(analysis))
    except Exception as e:
        logger.warning(f"{NAME} failed for {params.plugin_slug}: {e}")
        return error_result(f"Error: {e}")
