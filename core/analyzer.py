"""
Support issue analysis.

Derives keyword frequencies and a coarse topical grouping from a batch of
support-forum topics, using only their title and description text.
"""

import math
import re
from collections import Counter
from typing import Iterable, Sequence

from models import IssueCategory, KeywordStat, SupportTopic, TopIssuesAnalysis

__all__ = [
    "STOP_WORDS",
    "CATEGORY_RULES",
    "GENERAL_CATEGORY",
    "IssueAnalyzer",
    "analyze_topics",
    "round_half_up",
]

# ══════════════════════════════════════════════════════════════════════════════
# Configuration
# ══════════════════════════════════════════════════════════════════════════════

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "can", "cannot", "not", "no", "yes", "this",
        "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
        "me", "him", "her", "us", "them", "my", "your", "his", "its", "our",
        "their", "wordpress", "plugin", "how", "what", "when", "where", "why",
        "which", "who", "please", "help", "thanks", "thank",
    }
)

# Evaluated in order; the first rule with a matching trigger wins
CATEGORY_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Errors & Bugs", ("error", "not working", "broken", "issue", "problem", "bug", "fail")),
    ("Usage Questions", ("how to", "how do", "tutorial", "guide", "help", "usage")),
    ("Feature Requests", ("feature", "request", "add", "suggestion", "enhancement", "improvement")),
    ("Compatibility Issues", ("compatibility", "conflict", "theme", "update", "version")),
    ("Styling & Display", ("styling", "css", "appearance", "display", "layout", "design")),
    ("Installation & Setup", ("install", "setup", "configuration", "settings")),
)
GENERAL_CATEGORY = "General"

# ASCII word boundaries: accented letters split words rather than join them
WORD_PATTERN = re.compile(r"\b[a-z]{3,}\b", re.ASCII)

MIN_KEYWORD_FREQUENCY = 2
MAX_KEYWORDS = 20
MAX_CATEGORY_SAMPLES = 5
MAX_RECENT_ISSUES = 10


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# ══════════════════════════════════════════════════════════════════════════════
# Analyzer
# ══════════════════════════════════════════════════════════════════════════════


class IssueAnalyzer:
    """
    Keyword and category analysis over support topics.

    Stateless apart from its read-only word and rule tables, so a single
    instance can serve every request.
    """

    def __init__(
        self,
        stop_words: Iterable[str] = STOP_WORDS,
        category_rules: Sequence[tuple[str, Sequence[str]]] = CATEGORY_RULES,
    ):
        self.stop_words = frozenset(stop_words)
        self.category_rules = tuple((label, tuple(triggers)) for label, triggers in category_rules)

    def analyze_topics(self, plugin_slug: str, topics: Sequence[SupportTopic]) -> TopIssuesAnalysis:
        """Build the full analysis for one plugin. Never raises."""
        topics = list(topics)
        return TopIssuesAnalysis(
            plugin=plugin_slug,
            total_topics=len(topics),
            common_keywords=self.extract_keywords(topics),
            recent_issues=topics[:MAX_RECENT_ISSUES],
            issue_categories=self.categorize_topics(topics),
        )

    def extract_keywords(self, topics: Sequence[SupportTopic]) -> list[KeywordStat]:
        """
        Most frequent significant words across all topics.

        ``percentage`` is word frequency relative to the number of topics,
        not the share of topics containing the word, so it can exceed 100.
        """
        if not topics:
            return []

        counts: Counter[str] = Counter()
        for topic in topics:
            counts.update(
                word for word in WORD_PATTERN.findall(topic.text) if word not in self.stop_words
            )

        # Counter.most_common keeps first-seen order among equal counts
        frequent = [(w, n) for w, n in counts.most_common() if n >= MIN_KEYWORD_FREQUENCY]
        total = len(topics)
        return [
            KeywordStat(
                keyword=word,
                frequency=frequency,
                percentage=round_half_up(frequency / total * 100),
            )
            for word, frequency in frequent[:MAX_KEYWORDS]
        ]

    def classify_topic(self, topic: SupportTopic) -> str:
        text = topic.text
        for label, triggers in self.category_rules:
            if any(trigger in text for trigger in triggers):
                return label
        return GENERAL_CATEGORY

    def categorize_topics(self, topics: Sequence[SupportTopic]) -> list[IssueCategory]:
        """Bucket every topic into exactly one category, largest first."""
        buckets: dict[str, list[SupportTopic]] = {}
        for topic in topics:
            buckets.setdefault(self.classify_topic(topic), []).append(topic)

        categories = [
            IssueCategory(
                category=label,
                count=len(members),
                topics=members[:MAX_CATEGORY_SAMPLES],
            )
            for label, members in buckets.items()
        ]
        # sorted() is stable, so ties stay in discovery order
        return sorted(categories, key=lambda c: c.count, reverse=True)


_default_analyzer = IssueAnalyzer()


def analyze_topics(plugin_slug: str, topics: Sequence[SupportTopic]) -> TopIssuesAnalysis:
    """Analyze ``topics`` with the default word and rule tables."""
    return _default_analyzer.analyze_topics(plugin_slug, topics)
