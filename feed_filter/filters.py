"""Inclusion rules deciding which feed entries are kept."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import FrozenSet, Iterable, List, Optional
from urllib.parse import parse_qs, unquote, urlsplit

from .dates import try_parse_date
from .models import Entry

LOGGER = logging.getLogger(__name__)

MARKETING_PATH_SEGMENTS = ("/news/", "/articles/")
MARKETING_POST_TYPES = frozenset({"news", "article", "articles"})


@dataclass(frozen=True)
class FilterConfig:
    """Settings for one filter pass."""

    cutoff: Optional[datetime] = None
    allowed_authors: Optional[FrozenSet[str]] = None


def cutoff_from_days(days: int, now: datetime) -> Optional[datetime]:
    """Return the earliest accepted publication time, or ``None`` for no limit."""

    if days <= 0:
        return None
    return now - timedelta(days=days)


def is_marketing_link(link: str) -> bool:
    """Return True for news/article URLs, detected by path or ``post_type``."""

    try:
        parts = urlsplit(link)
        query = parse_qs(parts.query)
    except ValueError:
        return False

    path = unquote(parts.path)
    if any(segment in path for segment in MARKETING_PATH_SEGMENTS):
        return True

    post_type = query.get("post_type", [""])[0]
    return post_type in MARKETING_POST_TYPES


def is_corporate_author(author: Optional[str]) -> bool:
    """Return True for email addresses and "Name, Title" signatures."""

    if not author:
        return False
    return "@" in author or "," in author


class EntryFilter:
    """Applies the inclusion rules in a fixed order, stopping at the first miss."""

    def __init__(self, config: FilterConfig) -> None:
        self.config = config

    def rejection(self, entry: Entry) -> Optional[str]:
        """Return the name of the first rule that drops ``entry``, if any."""

        if is_marketing_link(entry.link):
            return "marketing-link"
        if is_corporate_author(entry.author):
            return "corporate-author"

        allowed = self.config.allowed_authors
        if allowed is not None and entry.author not in allowed:
            return "author-not-allowed"

        cutoff = self.config.cutoff
        if cutoff is not None:
            published = try_parse_date(entry.published_at)
            if published is None:
                return "unparseable-date"
            if published < cutoff:
                return "too-old"
        return None

    def keep(self, entry: Entry) -> bool:
        reason = self.rejection(entry)
        if reason is not None:
            LOGGER.debug("Dropping %s (%s)", entry.link, reason)
            return False
        return True

    def apply(self, entries: Iterable[Entry]) -> List[Entry]:
        entries = list(entries)
        kept = [entry for entry in entries if self.keep(entry)]
        LOGGER.info("Kept %d of %d entries", len(kept), len(entries))
        return kept


__all__ = [
    "EntryFilter",
    "FilterConfig",
    "cutoff_from_days",
    "is_corporate_author",
    "is_marketing_link",
]
