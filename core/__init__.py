"""
Core analysis for the WordPress Support Forum MCP.

    Issue Analysis    Keyword frequency and rule-based categorization
                      of support-forum topics
"""

from core.analyzer import (
    CATEGORY_RULES,
    GENERAL_CATEGORY,
    STOP_WORDS,
    IssueAnalyzer,
    analyze_topics,
    round_half_up,
)

__all__ = [
    "IssueAnalyzer",
    "analyze_topics",
    "round_half_up",
    "STOP_WORDS",
    "CATEGORY_RULES",
    "GENERAL_CATEGORY",
]
