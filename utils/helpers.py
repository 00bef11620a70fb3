"""Helper utilities for formatting tool responses."""

import json
from typing import Any

from mcp.types import CallToolResult, TextContent

ELLIPSIS = "..."


def truncate(text: str | None, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, appending "..." when shortened."""
    if not text:
        return ""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def text_result(text: str) -> CallToolResult:
    """Successful tool result carrying a single text block."""
    return CallToolResult(content=[TextContent(type="text", text=text)])


def json_result(payload: Any) -> CallToolResult:
    """Successful tool result with ``payload`` pretty-printed as JSON."""
    return text_result(json.dumps(payload, indent=2, ensure_ascii=False))


def error_result(message: str) -> CallToolResult:
    """Error-flagged tool result; the text is returned as-is."""
    return CallToolResult(
        content=[TextContent(type="text", text=message)],
        isError=True,
    )


def result_text(result: CallToolResult) -> str:
    """Concatenated text of every text block in ``result``."""
    return "".join(block.text for block in result.content if isinstance(block, TextContent))
