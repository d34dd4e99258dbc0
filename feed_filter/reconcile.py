"""Merging of a fresh entry batch into a previously published archive."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from .dates import try_parse_date
from .models import Entry

LOGGER = logging.getLogger(__name__)


def _recency_key(entry: Entry) -> Tuple[int, float]:
    published: Optional[datetime] = try_parse_date(entry.published_at)
    if published is None:
        return (1, 0.0)
    return (0, -published.timestamp())


def sort_by_recency(entries: Iterable[Entry]) -> List[Entry]:
    """Sort newest first.

    Entries without a parseable date go after every dated entry and keep
    their relative order among themselves.
    """

    return sorted(entries, key=_recency_key)


def merge_entries(new: Iterable[Entry], existing: Iterable[Entry], max_items: int) -> List[Entry]:
    """Merge ``new`` into ``existing``, deduplicated by identity key.

    On a key collision the entry from ``new`` replaces the archived one. The
    result is sorted by recency and cut to at most ``max_items`` entries.
    """

    if max_items < 1:
        raise ValueError(f"max_items must be positive, got {max_items}")

    merged: Dict[str, Entry] = {}
    existing_count = 0
    for entry in existing:
        merged[entry.identity_key] = entry
        existing_count += 1
    new_count = 0
    for entry in new:
        merged[entry.identity_key] = entry
        new_count += 1

    ordered = sort_by_recency(merged.values())
    result = ordered[:max_items]
    LOGGER.info(
        "Merged %d new and %d existing entries into %d (%d dropped over limit %d)",
        new_count,
        existing_count,
        len(result),
        len(ordered) - len(result),
        max_items,
    )
    return result


__all__ = ["merge_entries", "sort_by_recency"]
