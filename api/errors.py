"""Exceptions raised by the WordPress.org fetchers."""

__all__ = [
    "WordPressAPIError",
    "NotFoundError",
    "PluginNotFoundError",
    "FeedNotFoundError",
    "FetchError",
    "FeedStructureError",
]


class WordPressAPIError(Exception):
    """Base class for every WordPress.org fetch failure."""


class NotFoundError(WordPressAPIError):
    """The remote endpoint answered 404."""


class PluginNotFoundError(NotFoundError):
    def __init__(self, plugin_slug: str):
        self.plugin_slug = plugin_slug
        super().__init__(f"Plugin '{plugin_slug}' not found")


class FeedNotFoundError(NotFoundError):
    def __init__(self, plugin_slug: str):
        self.plugin_slug = plugin_slug
        super().__init__(f"Support feed for plugin '{plugin_slug}' not found")


class FetchError(WordPressAPIError):
    """Transport, HTTP status or decoding failure other than 404."""


class FeedStructureError(FetchError):
    """The feed document has no ``rss > channel`` element."""

    def __init__(self, detail: str = "Invalid RSS feed structure"):
        super().__init__(f"Failed to fetch support feed: {detail}")
