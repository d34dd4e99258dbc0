"""Shared fixtures for feed filter tests."""

from datetime import datetime, timezone

import pytest

from feed_filter.models import Entry

SAMPLE_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:content="http://purl.org/rss/1.0/modules/content/">
  <channel>
    <title>Engineering Blog</title>
    <link>https://blog.example.com/</link>
    <description>Posts</description>
    <item>
      <title>Scaling Postgres</title>
      <link>https://blog.example.com/posts/scaling-postgres</link>
      <guid>post-1</guid>
      <pubDate>Sun, 09 Jun 2024 12:00:00 +0000</pubDate>
      <dc:creator>Jane Doe</dc:creator>
      <description>How we scaled</description>
      <content:encoded><![CDATA[<p>Long <b>story</b></p>]]></content:encoded>
      <category>databases</category>
      <category>postgres</category>
    </item>
    <item>
      <title>Company Update</title>
      <link>https://blog.example.com/news/company-update</link>
      <guid>post-2</guid>
      <pubDate>Sun, 09 Jun 2024 13:00:00 +0000</pubDate>
      <dc:creator>Jane Doe</dc:creator>
    </item>
    <item>
      <title>Quarterly Results</title>
      <link>https://blog.example.com/posts/results</link>
      <guid>post-3</guid>
      <pubDate>Sat, 08 Jun 2024 09:00:00 +0000</pubDate>
      <dc:creator>John Smith, CFO</dc:creator>
    </item>
    <item>
      <title>Old Post</title>
      <link>https://blog.example.com/posts/old</link>
      <pubDate>Mon, 01 Jan 2024 09:00:00 +0000</pubDate>
      <dc:creator>Alex Roe</dc:creator>
    </item>
  </channel>
</rss>
"""

NOW = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_feed():
    return SAMPLE_FEED


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_entry():
    """Return a factory building entries whose GUID and link derive from a key."""

    def factory(key, published_at=None, title=None, **kwargs):
        return Entry(
            title=title or f"Post {key}",
            link=kwargs.pop("link", f"https://blog.example.com/posts/{key}"),
            published_at=published_at,
            id=kwargs.pop("id", key),
            **kwargs,
        )

    return factory
