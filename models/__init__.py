"""
Data models for the WordPress Support Forum MCP.

Provides Pydantic models for tool input validation, for the data fetched
from WordPress.org, and for the issue analysis result.
"""

from models.config import SERVER_NAME, SERVER_VERSION, USER_AGENT, Settings, get_settings
from models.forum import (
    IssueCategory,
    KeywordStat,
    PluginInfo,
    SupportFeed,
    SupportTopic,
    TopIssuesAnalysis,
)
from models.inputs import (
    PluginInfoInput,
    SearchPluginsInput,
    SupportTopicsInput,
    TopIssuesInput,
)

__all__ = [
    # Configuration
    "SERVER_NAME",
    "SERVER_VERSION",
    "USER_AGENT",
    "Settings",
    "get_settings",
    # Fetched data
    "PluginInfo",
    "SupportTopic",
    "SupportFeed",
    # Analysis
    "KeywordStat",
    "IssueCategory",
    "TopIssuesAnalysis",
    # Tool inputs
    "PluginInfoInput",
    "SupportTopicsInput",
    "TopIssuesInput",
    "SearchPluginsInput",
]
