"""
WordPress.org Support Forum Feeds.

Every plugin's support forum publishes an RSS 2.0 feed of its most recent
topics at https://wordpress.org/support/plugin/<slug>/feed/. The feed is
fetched in one request and parsed with BeautifulSoup's XML builder; any
limit is applied client-side.
"""

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup, Tag

from api.errors import FeedNotFoundError, FeedStructureError, FetchError
from models import USER_AGENT, SupportFeed, SupportTopic, get_settings

__all__ = ["get_feed_for_plugin", "get_recent_topics", "parse_feed"]

logger = logging.getLogger(__name__)

# ══════════════════════════════════════════════════════════════════════════════
# Parsing
# ══════════════════════════════════════════════════════════════════════════════


def _child_text(parent: Tag, name: str) -> Optional[str]:
    """Text of the first direct child called ``name``, or None."""
    child = parent.find(name, recursive=False)
    if child is None:
        return None
    return child.get_text()


def _parse_item(item: Tag) -> SupportTopic:
    return SupportTopic(
        title=_child_text(item, "title") or "",
        link=_child_text(item, "link") or "",
        description=_child_text(item, "description") or "",
        pub_date=_child_text(item, "pubDate") or "",
        guid=_child_text(item, "guid") or "",
        author=_child_text(item, "dc:creator") or None,
        category=_child_text(item, "category") or None,
    )


def parse_feed(xml_text: str) -> SupportFeed:
    """
    Parse an RSS 2.0 document into a SupportFeed.

    Raises:
        FeedStructureError: The document has no ``rss > channel``
    """
    soup = BeautifulSoup(xml_text, "xml")
    rss = soup.find("rss")
    channel = rss.find("channel", recursive=False) if rss else None
    if channel is None:
        raise FeedStructureError()

    return SupportFeed(
        title=_child_text(channel, "title") or "",
        description=_child_text(channel, "description") or "",
        link=_child_text(channel, "link") or "",
        items=[_parse_item(item) for item in channel.find_all("item", recursive=False)],
    )


# ══════════════════════════════════════════════════════════════════════════════
# Fetching
# ══════════════════════════════════════════════════════════════════════════════


async def get_feed_for_plugin(plugin_slug: str) -> SupportFeed:
    """
    Fetch and parse the support feed of one plugin.

    Raises:
        FeedNotFoundError: The forum does not exist
        FeedStructureError: The response is not an RSS channel
        FetchError: Any other failure
    """
    settings = get_settings()
    url = f"{settings.support_feed_url}/{plugin_slug}/feed/"
    logger.debug(f"Fetching support feed: {url}")

    try:
        async with httpx.AsyncClient(timeout=settings.timeout, follow_redirects=True) as client:
            response = await client.get(url, headers={"User-Agent": USER_AGENT})
            response.raise_for_status()
            xml_text = response.text
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 404:
            raise FeedNotFoundError(plugin_slug) from e
        logger.warning(f"Support feed request failed for {plugin_slug}: {e}")
        raise FetchError(f"Failed to fetch support feed: {e}") from e
    except Exception as e:
        logger.warning(f"Support feed request failed for {plugin_slug}: {e}")
        raise FetchError(f"Failed to fetch support feed: {e}") from e

    feed = parse_feed(xml_text)
    logger.debug(f"Parsed {len(feed.items)} topics for {plugin_slug}")
    return feed


async def get_recent_topics(plugin_slug: str, limit: int = 10) -> list[SupportTopic]:
    """Most recent ``limit`` topics of a plugin's support forum."""
    feed = await get_feed_for_plugin(plugin_slug)
    return feed.items[:limit]
