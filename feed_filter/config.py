"""Configuration utilities for the feed filter."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, FrozenSet, Mapping, Optional

from .allowlist import parse_allow_list
from .errors import ConfigError

ALLOWED_AUTHORS_ENV = "ALLOWED_AUTHOR_LIST"
TIMEOUT_ENV = "FEED_FILTER_TIMEOUT"
DEFAULT_MAX_ITEMS = 1000
DEFAULT_TIMEOUT = 30.0


class OutputFormat(str, enum.Enum):
    RSS = "rss"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class Config:
    """Runtime configuration values for one filter run."""

    feed_url: str
    since_days: int = 0
    output_format: OutputFormat = OutputFormat.RSS
    merge_existing: Optional[str] = None
    max_items: int = DEFAULT_MAX_ITEMS
    allowed_authors: Optional[FrozenSet[str]] = None
    timeout: float = DEFAULT_TIMEOUT
    now: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def _timeout(environ: Mapping[str, str]) -> float:
    raw = environ.get(TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return value


def load_config(args: Any, environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a validated configuration from parsed arguments and the environment."""

    environ = os.environ if environ is None else environ

    feed_url = (args.feed or "").strip()
    if not feed_url:
        raise ConfigError("--feed parameter is required")

    try:
        output_format = OutputFormat(args.format)
    except ValueError:
        raise ConfigError("--format must be 'rss' or 'markdown'") from None

    if args.since < 0:
        raise ConfigError("--since must not be negative")
    if args.max_items < 1:
        raise ConfigError("--max-items must be at least 1")

    allowed_authors = None
    if args.authors:
        raw = environ.get(ALLOWED_AUTHORS_ENV, "")
        if not raw:
            raise ConfigError(
                f"--authors flag requires {ALLOWED_AUTHORS_ENV} environment variable to be set"
            )
        allowed_authors = parse_allow_list(raw)

    return Config(
        feed_url=feed_url,
        since_days=args.since,
        output_format=output_format,
        merge_existing=(args.merge_existing or "").strip() or None,
        max_items=args.max_items,
        allowed_authors=allowed_authors,
        timeout=_timeout(environ),
    )


__all__ = ["Config", "OutputFormat", "load_config"]
