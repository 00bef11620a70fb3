"""Input models for the MCP tools.

Each model validates the raw ``arguments`` dict of a tool call: required
fields, numeric bounds and defaults mirror the advertised JSON schemas.
"""

import math
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

__all__ = [
    "PluginInfoInput",
    "SupportTopicsInput",
    "TopIssuesInput",
    "SearchPluginsInput",
]

_INPUT_CONFIG = ConfigDict(str_strip_whitespace=True, extra="ignore")


def _truncate_number(v: Any) -> Any:
    # Counts arrive as JSON numbers; fractional values are cut toward zero
    if isinstance(v, float) and math.isfinite(v):
        return math.trunc(v)
    return v


Count = Annotated[int, BeforeValidator(_truncate_number)]


class PluginInfoInput(BaseModel):
    """Input model for get_plugin_info."""

    model_config = _INPUT_CONFIG

    plugin_slug: str = Field(
        ...,
        description='The WordPress plugin slug (e.g., "mathml-block")',
        min_length=1,
    )


class SupportTopicsInput(BaseModel):
    """Input model for get_support_topics."""

    model_config = _INPUT_CONFIG

    plugin_slug: str = Field(
        ...,
        description='The WordPress plugin slug (e.g., "mathml-block")',
        min_length=1,
    )
    limit: Count = Field(
        default=20,
        description="Number of topics to retrieve (default: 20)",
        ge=1,
        le=100,
    )


class TopIssuesInput(BaseModel):
    """Input model for analyze_top_issues."""

    model_config = _INPUT_CONFIG

    plugin_slug: str = Field(
        ...,
        description='The WordPress plugin slug (e.g., "mathml-block")',
        min_length=1,
    )
    max_topics: Count = Field(
        default=50,
        description="Maximum number of topics to analyze (default: 50)",
        ge=10,
        le=200,
    )


class SearchPluginsInput(BaseModel):
    """Input model for search_plugins."""

    model_config = _INPUT_CONFIG

    query: str = Field(
        ...,
        description="Search query for WordPress plugins",
        min_length=1,
    )
    page: Count = Field(default=1, description="Page number (default: 1)", ge=1)
    per_page: Count = Field(
        default=10,
        description="Results per page (default: 10)",
        ge=1,
        le=50,
    )
