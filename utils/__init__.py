"""
Utility functions shared by the tool handlers.

All utilities are stateless; they only shape CallToolResult envelopes.
"""

from utils.helpers import (
    ELLIPSIS,
    error_result,
    json_result,
    result_text,
    text_result,
    truncate,
)

__all__ = [
    "ELLIPSIS",
    "truncate",
    "text_result",
    "json_result",
    "error_result",
    "result_text",
]
