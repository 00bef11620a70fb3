"""Unit tests for api/support_feed.py."""

from unittest.mock import patch

import httpx
import pytest

from api.errors import FeedNotFoundError, FeedStructureError, FetchError
from api.support_feed import get_feed_for_plugin, get_recent_topics, parse_feed
from conftest import install_get, mock_response
from models import USER_AGENT


class TestParseFeed:
    """Test suite for parse_feed."""

    def test_channel_fields(self, sample_feed):
        feed = parse_feed(sample_feed)
        assert feed.title == "MathML Block | WordPress.org"
        assert feed.link == "https://wordpress.org/support/plugin/mathml-block/"
        assert feed.description == "Support forum for MathML Block"
        assert len(feed.items) == 3

    def test_item_fields(self, sample_feed):
        first = parse_feed(sample_feed).items[0]
        assert first.title == "Formula not rendering after update"
        assert first.link == "https://wordpress.org/support/topic/formula-not-rendering/"
        assert first.pub_date == "Mon, 06 Oct 2025 10:00:00 +0000"
        assert first.author == "alice"
        assert first.guid == "https://wordpress.org/support/topic/formula-not-rendering/"
        assert first.category is None

    def test_cdata_description_keeps_html(self, sample_feed):
        first = parse_feed(sample_feed).items[0]
        assert first.description.startswith("<p>The block shows raw <code>")

    def test_optional_fields(self, sample_feed):
        items = parse_feed(sample_feed).items
        assert items[1].category == "Support"
        assert items[2].author is None
        assert items[2].description == ""
        assert items[2].pub_date == ""

    def test_empty_channel(self):
        feed = parse_feed('<rss version="2.0"><channel><title>Empty</title></channel></rss>')
        assert feed.title == "Empty"
        assert feed.items == []

    @pytest.mark.parametrize(
        "document",
        [
            '<rss version="2.0"></rss>',
            "<feed><entry/></feed>",
            "<html><body>Not a feed</body></html>",
            "",
        ],
    )
    def test_missing_channel_raises(self, document):
        with pytest.raises(FeedStructureError, match="Invalid RSS feed structure"):
            parse_feed(document)


class TestGetFeedForPlugin:
    """Test suite for get_feed_for_plugin."""

    @pytest.mark.asyncio
    async def test_fetches_feed_url_with_user_agent(self, sample_feed):
        with patch("httpx.AsyncClient") as mock_client:
            get = install_get(mock_client, return_value=mock_response(text=sample_feed))
            feed = await get_feed_for_plugin("mathml-block")

        assert len(feed.items) == 3
        args, kwargs = get.call_args
        assert args[0] == "https://wordpress.org/support/plugin/mathml-block/feed/"
        assert kwargs["headers"]["User-Agent"] == USER_AGENT

    @pytest.mark.asyncio
    async def test_feed_url_from_environment(self, monkeypatch, sample_feed):
        monkeypatch.setenv("WP_SUPPORT_FEED_URL", "https://mirror.example.org/support/plugin/")
        with patch("httpx.AsyncClient") as mock_client:
            get = install_get(mock_client, return_value=mock_response(text=sample_feed))
            await get_feed_for_plugin("mathml-block")

        assert get.call_args[0][0] == "https://mirror.example.org/support/plugin/mathml-block/feed/"

    @pytest.mark.asyncio
    async def test_404_raises_not_found(self):
        with patch("httpx.AsyncClient") as mock_client:
            install_get(mock_client, return_value=mock_response(status_code=404))
            with pytest.raises(FeedNotFoundError, match="Support feed for plugin 'ghost' not found"):
                await get_feed_for_plugin("ghost")

    @pytest.mark.asyncio
    async def test_server_error_raises_fetch_error(self):
        with patch("httpx.AsyncClient") as mock_client:
            install_get(mock_client, return_value=mock_response(status_code=503))
            with pytest.raises(FetchError, match="Failed to fetch support feed"):
                await get_feed_for_plugin("mathml-block")

    @pytest.mark.asyncio
    async def test_transport_error_raises_fetch_error(self):
        with patch("httpx.AsyncClient") as mock_client:
            install_get(mock_client, side_effect=httpx.ConnectError("connection refused"))
            with pytest.raises(FetchError, match="connection refused"):
                await get_feed_for_plugin("mathml-block")

    @pytest.mark.asyncio
    async def test_malformed_document_raises_structure_error(self):
        with patch("httpx.AsyncClient") as mock_client:
            install_get(mock_client, return_value=mock_response(text="<html></html>"))
            with pytest.raises(FeedStructureError):
                await get_feed_for_plugin("mathml-block")


class TestGetRecentTopics:
    """Test suite for get_recent_topics."""

    @pytest.mark.asyncio
    async def test_truncates_client_side(self, sample_feed):
        with patch("httpx.AsyncClient") as mock_client:
            install_get(mock_client, return_value=mock_response(text=sample_feed))
            topics = await get_recent_topics("mathml-block", limit=2)

        assert [t.title for t in topics] == [
            "Formula not rendering after update",
            "How to change font size",
        ]

    @pytest.mark.asyncio
    async def test_limit_larger_than_feed(self, sample_feed):
        with patch("httpx.AsyncClient") as mock_client:
            install_get(mock_client, return_value=mock_response(text=sample_feed))
            topics = await get_recent_topics("mathml-block", limit=50)

        assert len(topics) == 3
