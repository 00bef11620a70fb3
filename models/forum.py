"""Models for WordPress.org plugin data, support feeds and issue analysis."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = [
    "PluginInfo",
    "SupportTopic",
    "SupportFeed",
    "KeywordStat",
    "IssueCategory",
    "TopIssuesAnalysis",
]

# ══════════════════════════════════════════════════════════════════════════════
# Fetched Data
# ══════════════════════════════════════════════════════════════════════════════


class PluginInfo(BaseModel):
    """Plugin metadata as returned by the plugins/info/1.0 endpoint."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    slug: str = ""
    version: str = ""
    author: str = ""
    author_profile: str = ""
    requires: str = ""
    tested: str = ""
    requires_php: str = ""
    rating: Union[int, float] = 0
    ratings: dict[str, int] = Field(default_factory=dict)
    num_ratings: int = 0
    support_threads: int = 0
    downloaded: int = 0
    description: str = ""
    installation: str = ""
    changelog: str = ""
    homepage: str = ""
    download_link: str = ""
    tags: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def lift_sections(cls, data: Any) -> Any:
        """Copy description/installation/changelog out of ``sections``."""
        if not isinstance(data, dict):
            return data
        sections = data.get("sections")
        if isinstance(sections, dict):
            data = dict(data)
            for key in ("description", "installation", "changelog"):
                if not data.get(key) and sections.get(key):
                    data[key] = sections[key]
        return data

    @field_validator(
        "name",
        "slug",
        "version",
        "author",
        "author_profile",
        "requires",
        "tested",
        "requires_php",
        "description",
        "installation",
        "changelog",
        "homepage",
        "download_link",
        mode="before",
    )
    @classmethod
    def blank_falsy_strings(cls, v: Any) -> Any:
        # Upstream sends ``false`` or ``null`` for unset version constraints
        if v is None or v is False:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("rating", "num_ratings", "support_threads", "downloaded", mode="before")
    @classmethod
    def zero_missing_numbers(cls, v: Any) -> Any:
        return 0 if v in (None, "", False) else v

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        # An untagged plugin comes back as ``[]`` instead of ``{}``
        if not v:
            return {}
        if isinstance(v, list):
            return {str(tag): str(tag) for tag in v}
        return v

    @field_validator("ratings", mode="before")
    @classmethod
    def normalize_ratings(cls, v: Any) -> Any:
        if not v:
            return {}
        if isinstance(v, list):
            return {str(i + 1): count for i, count in enumerate(v)}
        return {str(k): count for k, count in v.items()}

    def tag_names(self, limit: Optional[int] = None) -> list[str]:
        """Tag slugs in upstream order, optionally capped."""
        names = list(self.tags)
        return names if limit is None else names[:limit]


class SupportTopic(BaseModel):
    """One item of a plugin's support-forum RSS feed."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: str = ""
    description: str = ""
    pub_date: str = ""
    guid: str = ""
    author: Optional[str] = None
    category: Optional[str] = None

    @property
    def text(self) -> str:
        """Lowercased title and description, the input to analysis."""
        return f"{self.title} {self.description}".lower()


class SupportFeed(BaseModel):
    """An RSS channel together with its topics."""

    title: str = ""
    description: str = ""
    link: str = ""
    items: list[SupportTopic] = Field(default_factory=list)


# ══════════════════════════════════════════════════════════════════════════════
# Analysis Results
# ══════════════════════════════════════════════════════════════════════════════


class KeywordStat(BaseModel):
    keyword: str
    frequency: int
    percentage: int


class IssueCategory(BaseModel):
    category: str
    count: int
    topics: list[SupportTopic] = Field(default_factory=list)


class TopIssuesAnalysis(BaseModel):
    """Keyword statistics and category buckets for one batch of topics."""

    plugin: str
    total_topics: int = 0
    common_keywords: list[KeywordStat] = Field(default_factory=list)
    recent_issues: list[SupportTopic] = Field(default_factory=list)
    issue_categories: list[IssueCategory] = Field(default_factory=list)
