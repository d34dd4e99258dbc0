"""Command-line entry point for the feed filter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_MAX_ITEMS, OutputFormat, load_config
from .errors import ConfigError, FeedFilterError
from .pipeline import run

LOGGER = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feed-filter",
        description="Filter an RSS feed and optionally merge it into a published archive",
    )
    parser.add_argument("--feed", default="", help="RSS feed URL (required)")
    parser.add_argument(
        "--since",
        type=int,
        default=0,
        help="Number of days to look back (0 = no limit)",
    )
    parser.add_argument(
        "--authors",
        action="store_true",
        help="Enable author filtering using the ALLOWED_AUTHOR_LIST environment variable",
    )
    parser.add_argument(
        "--format",
        default=OutputFormat.RSS.value,
        help="Output format: 'rss' or 'markdown'",
    )
    parser.add_argument(
        "--merge-existing",
        default="",
        help="URL of an existing RSS feed to merge with (optional)",
    )
    parser.add_argument(
        "--max-items",
        type=int,
        default=DEFAULT_MAX_ITEMS,
        help="Maximum number of items to keep in the merged feed",
    )
    parser.add_argument("--output", type=Path, help="Write the result to this file instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        config = load_config(args)
        result = run(config)
    except FeedFilterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if isinstance(exc, ConfigError):
            parser.print_usage(sys.stderr)
        return exc.exit_code

    if args.output:
        args.output.write_text(result.output, encoding="utf-8")
        LOGGER.info("Output written to %s", args.output)
    else:
        sys.stdout.write(result.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
