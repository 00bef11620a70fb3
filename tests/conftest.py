"""Shared fixtures: support topics, RSS documents and mocked HTTP clients."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from models import SupportTopic

SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title>MathML Block | WordPress.org</title>
    <link>https://wordpress.org/support/plugin/mathml-block/</link>
    <description>Support forum for MathML Block</description>
    <item>
      <title>Formula not rendering after update</title>
      <link>https://wordpress.org/support/topic/formula-not-rendering/</link>
      <pubDate>Mon, 06 Oct 2025 10:00:00 +0000</pubDate>
      <dc:creator>alice</dc:creator>
      <guid isPermaLink="false">https://wordpress.org/support/topic/formula-not-rendering/</guid>
      <description><![CDATA[<p>The block shows raw <code>\\frac</code> since 2.1.</p>]]></description>
    </item>
    <item>
      <title>How to change font size</title>
      <link>https://wordpress.org/support/topic/font-size/</link>
      <pubDate>Sun, 05 Oct 2025 08:30:00 +0000</pubDate>
      <dc:creator>bob</dc:creator>
      <category>Support</category>
      <guid>https://wordpress.org/support/topic/font-size/</guid>
      <description>Is there a setting for this?</description>
    </item>
    <item>
      <title>Great plugin</title>
      <link>https://wordpress.org/support/topic/great-plugin/</link>
      <guid>https://wordpress.org/support/topic/great-plugin/</guid>
    </item>
  </channel>
</rss>
"""


def make_topic(title: str = "", description: str = "", **fields: Any) -> SupportTopic:
    """SupportTopic with sensible link/guid defaults."""
    slug = "-".join(title.lower().split()) or "topic"
    fields.setdefault("link", f"https://wordpress.org/support/topic/{slug}/")
    fields.setdefault("guid", fields["link"])
    fields.setdefault("pub_date", "Mon, 06 Oct 2025 10:00:00 +0000")
    return SupportTopic(title=title, description=description, **fields)


def http_status_error(status_code: int, url: str = "https://example.org/") -> httpx.HTTPStatusError:
    request = httpx.Request("GET", url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(f"HTTP {status_code}", request=request, response=response)


def mock_response(*, json_data: Any = None, text: str = "", status_code: int = 200) -> MagicMock:
    """Response double; non-2xx codes make raise_for_status raise."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status = MagicMock(side_effect=http_status_error(status_code))
    else:
        response.raise_for_status = MagicMock()
    return response


def install_get(mock_client: MagicMock, **kwargs: Any) -> AsyncMock:
    """Wire ``client.get`` on a patched ``httpx.AsyncClient`` and return it."""
    get = AsyncMock(**kwargs)
    mock_client.return_value.__aenter__.return_value.get = get
    return get


@pytest.fixture
def sample_feed() -> str:
    return SAMPLE_FEED


@pytest.fixture(autouse=True)
def default_endpoints(monkeypatch):
    """Pin endpoints so a developer's .env cannot leak into tests."""
    monkeypatch.setenv("WP_PLUGIN_INFO_URL", "https://api.wordpress.org/plugins/info/1.0")
    monkeypatch.setenv("WP_PLUGIN_SEARCH_URL", "https://api.wordpress.org/plugins/info/1.1/")
    monkeypatch.setenv("WP_SUPPORT_FEED_URL", "https://wordpress.org/support/plugin")
    monkeypatch.setenv("WP_API_TIMEOUT", "30")
