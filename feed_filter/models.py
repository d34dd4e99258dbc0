"""Shared dataclasses and type definitions for the feed filter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple


def _optional(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


@dataclass(frozen=True)
class Entry:
    """A single feed item as read from an RSS document."""

    title: str
    link: str
    published_at: Optional[str] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    body: Optional[str] = None
    id: Optional[str] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def identity_key(self) -> str:
        """Return the deduplication key: the GUID when present, else the link."""

        return self.id if self.id else self.link

    @classmethod
    def from_feed_entry(cls, raw: Mapping[str, Any], creator: Optional[str] = None) -> "Entry":
        """Build an entry from a feedparser entry dict.

        feedparser folds dc:creator, <author> and itunes:author into one
        ``author`` key, so the dc:creator text is passed in separately.
        """

        body = None
        content = raw.get("content") or []
        if content:
            body = _optional(content[0].get("value"))

        summary = _optional(raw.get("summary"))
        # feedparser copies content:encoded into summary when no description exists.
        if summary is not None and summary == body:
            summary = None

        tags = tuple(
            tag.get("term")
            for tag in raw.get("tags") or []
            if tag.get("term") and tag.get("term").strip()
        )
        return cls(
            title=raw.get("title", "") or "",
            link=raw.get("link", "") or "",
            published_at=_optional(raw.get("published")),
            author=_optional(creator),
            summary=summary,
            body=body,
            id=_optional(raw.get("id")),
            tags=tags,
        )


__all__ = ["Entry"]
