"""Rendering of the final entry list as Markdown or RSS."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Sequence

from .config import OutputFormat
from .models import Entry

UNKNOWN_AUTHOR = "Unknown"
CHANNEL_TITLE = "Filtered Technical Blog Posts"
CHANNEL_DESCRIPTION = "Filtered feed of technical blog posts"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
CONTENT_NAMESPACE = "http://purl.org/rss/1.0/modules/content/"
BUILD_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %z"

_XML_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    """Escape XML markup characters; ``&`` goes first to avoid double escaping."""

    for char, entity in _XML_REPLACEMENTS:
        text = text.replace(char, entity)
    return text


def cdata(text: str) -> str:
    # "]]>" would close the section early, so split it across two sections.
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def render_markdown(entries: Iterable[Entry]) -> str:
    lines = []
    for entry in entries:
        author = entry.author or UNKNOWN_AUTHOR
        lines.append(f"- [{entry.title}]({entry.link}) - {author}")
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _item_lines(entry: Entry) -> List[str]:
    lines = ["    <item>"]
    lines.append(f"      <title>{escape_xml(entry.title)}</title>")
    lines.append(f"      <link>{escape_xml(entry.link)}</link>")
    if entry.id:
        lines.append(f"      <guid>{escape_xml(entry.id)}</guid>")
    if entry.published_at:
        lines.append(f"      <pubDate>{escape_xml(entry.published_at)}</pubDate>")
    if entry.author:
        lines.append(f"      <dc:creator>{escape_xml(entry.author)}</dc:creator>")
    if entry.summary:
        lines.append(f"      <description>{escape_xml(entry.summary)}</description>")
    if entry.body:
        lines.append(f"      <content:encoded>{cdata(entry.body)}</content:encoded>")
    for tag in entry.tags:
        if tag:
            lines.append(f"      <category>{escape_xml(tag)}</category>")
    lines.append("    </item>")
    return lines


def render_rss(entries: Iterable[Entry], feed_url: str, built_at: datetime) -> str:
    """Render an RSS 2.0 document describing ``entries``."""

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<rss version="2.0" xmlns:dc="{DC_NAMESPACE}" xmlns:content="{CONTENT_NAMESPACE}">',
        "  <channel>",
        f"    <title>{CHANNEL_TITLE}</title>",
        f"    <link>{escape_xml(feed_url)}</link>",
        f"    <description>{CHANNEL_DESCRIPTION}</description>",
        f"    <lastBuildDate>{built_at.strftime(BUILD_DATE_FORMAT)}</lastBuildDate>",
    ]
    for entry in entries:
        lines.extend(_item_lines(entry))
    lines.append("  </channel>")
    lines.append("</rss>")
    return "\n".join(lines) + "\n"


def render(entries: Sequence[Entry], output_format: OutputFormat, feed_url: str, built_at: datetime) -> str:
    if output_format is OutputFormat.MARKDOWN:
        return render_markdown(entries)
    return render_rss(entries, feed_url, built_at)


__all__ = ["cdata", "escape_xml", "render", "render_markdown", "render_rss"]
