"""
MCP tool definitions and handlers.

Each tool module exposes a static ``TOOL`` definition and an async handler
taking the raw ``arguments`` dict and returning a CallToolResult:

    get_plugin_info       Plugin directory metadata
    get_support_topics    Recent support-forum topics
    analyze_top_issues    Keyword and category summary of support topics
    search_plugins        Plugin directory search
"""

from typing import Any, Awaitable, Callable

from mcp.types import CallToolResult, Tool

from tools import plugin_info, search_plugins, support_topics, top_issues

ToolHandler = Callable[[dict[str, Any] | None], Awaitable[CallToolResult]]

TOOLS: list[Tool] = [
    plugin_info.TOOL,
    support_topics.TOOL,
    top_issues.TOOL,
    search_plugins.TOOL,
]

HANDLERS: dict[str, ToolHandler] = {
    plugin_info.NAME: plugin_info.handle_get_plugin_info,
    support_topics.NAME: support_topics.handle_get_support_topics,
    top_issues.NAME: top_issues.handle_analyze_top_issues,
    search_plugins.NAME: search_plugins.handle_search_plugins,
}

__all__ = ["TOOLS", "HANDLERS", "ToolHandler"]
