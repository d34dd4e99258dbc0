"""High-level orchestration of one filter run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from .config import Config
from .errors import FetchError, ParseError
from .fetchers import fetch_archive, fetch_feed, parse_feed
from .filters import EntryFilter, FilterConfig, cutoff_from_days
from .models import Entry
from .reconcile import merge_entries
from .render import render

LOGGER = logging.getLogger(__name__)

Fetch = Callable[[str, float], bytes]
FetchExisting = Callable[[str, float], List[Entry]]


@dataclass
class RunResult:
    entries: List[Entry]
    output: str
    merged: bool = False


def filter_feed(config: Config, fetch: Fetch = fetch_feed) -> List[Entry]:
    """Fetch the source feed and apply the inclusion rules."""

    entries = parse_feed(fetch(config.feed_url, config.timeout))
    entry_filter = EntryFilter(
        FilterConfig(
            cutoff=cutoff_from_days(config.since_days, config.now),
            allowed_authors=config.allowed_authors,
        )
    )
    return entry_filter.apply(entries)


def run(
    config: Config,
    fetch: Fetch = fetch_feed,
    fetch_existing: FetchExisting = fetch_archive,
) -> RunResult:
    """Run the whole pipeline and return the rendered output.

    Failures on the source feed propagate. A failure on the existing feed is
    logged and the filtered entries are rendered on their own.
    """

    LOGGER.info("Starting filter run for %s", config.feed_url)
    entries = filter_feed(config, fetch)

    merged = False
    if config.merge_existing:
        try:
            existing = fetch_existing(config.merge_existing, config.timeout)
        except (FetchError, ParseError) as exc:
            LOGGER.warning("could not fetch existing feed: %s", exc)
        else:
            entries = merge_entries(entries, existing, config.max_items)
            merged = True

    output = render(entries, config.output_format, config.feed_url, config.now)
    LOGGER.info("Rendered %d entries as %s", len(entries), config.output_format.value)
    return RunResult(entries=entries, output=output, merged=merged)


__all__ = ["RunResult", "filter_feed", "run"]
