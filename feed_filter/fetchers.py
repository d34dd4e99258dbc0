"""Retrieval and parsing of RSS documents."""

from __future__ import annotations

import logging
from typing import List, Optional
from xml.etree import ElementTree

import feedparser
import requests

from .errors import FeedStatusError, FetchError, ParseError
from .models import Entry

LOGGER = logging.getLogger(__name__)

USER_AGENT = "FeedFilter/1.0 (RSS Feed Filter)"
DC_CREATOR = "{http://purl.org/dc/elements/1.1/}creator"
ITEM_TAGS = frozenset({"item", "entry"})

# Raised for documents whose declared encoding or content type was wrong but
# which still parsed as XML.
HARMLESS_BOZO = (feedparser.CharacterEncodingOverride, feedparser.NonXMLContentType)


def fetch_feed(url: str, timeout: float = 30.0) -> bytes:
    """Download a feed document and return its raw bytes.

    Raises:
        FetchError: on transport failures.
        FeedStatusError: when the server does not answer 200 OK.
    """

    LOGGER.info("Fetching feed: %s", url)
    try:
        response = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as exc:
        raise FetchError(f"could not fetch {url}: {exc}") from exc

    if response.status_code != requests.codes.ok:
        raise FeedStatusError(url, response.status_code)
    return response.content


def _creators(content: bytes) -> List[Optional[str]]:
    """Return the dc:creator text of each item, in document order."""

    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as exc:
        raise ParseError(f"could not parse feed: {exc}") from exc

    creators = []
    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        if element.tag.rpartition("}")[2] not in ITEM_TAGS:
            continue
        creators.append(element.findtext(DC_CREATOR))
    return creators


def parse_feed(content: bytes) -> List[Entry]:
    """Parse an RSS document into entries, preserving document order.

    Raises:
        ParseError: if the document is not well formed.
    """

    feed = feedparser.parse(content, sanitize_html=False, resolve_relative_uris=False)
    exc = feed.get("bozo_exception")
    if feed.bozo and not isinstance(exc, HARMLESS_BOZO):
        raise ParseError(f"could not parse feed: {exc}")

    creators = _creators(content)
    if len(creators) != len(feed.entries):
        LOGGER.warning(
            "Found %d items but %d entries; ignoring dc:creator", len(creators), len(feed.entries)
        )
        creators = [None] * len(feed.entries)

    entries = [
        Entry.from_feed_entry(item, creator=creator)
        for item, creator in zip(feed.entries, creators)
    ]
    LOGGER.info("Parsed %d entries from feed", len(entries))
    return entries


def fetch_archive(url: str, timeout: float = 30.0) -> List[Entry]:
    """Fetch the previously published feed.

    A 404 means nothing has been published yet and yields an empty list.
    """

    try:
        content = fetch_feed(url, timeout=timeout)
    except FeedStatusError as exc:
        if exc.status_code == requests.codes.not_found:
            LOGGER.info("Existing feed %s not found; starting a new archive", url)
            return []
        raise
    return parse_feed(content)


__all__ = ["USER_AGENT", "fetch_archive", "fetch_feed", "parse_feed"]
