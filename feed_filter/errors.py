"""Exception hierarchy for the feed filter."""

from __future__ import annotations

from typing import Optional


class FeedFilterError(Exception):
    """Base class for errors that abort a run."""

    exit_code: int = 1


class ConfigError(FeedFilterError):
    exit_code = 2


class FetchError(FeedFilterError):
    """Transport failure while retrieving a feed."""

    exit_code = 3


class FeedStatusError(FetchError):
    """The server answered with a non-success status."""

    exit_code = 4

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"received status code {status_code} from {url}")
        self.url = url
        self.status_code = status_code


class ParseError(FeedFilterError):
    exit_code = 5


class DateUnparseable(ValueError):
    """Raised when a timestamp matches none of the known encodings."""

    def __init__(self, value: Optional[str]) -> None:
        super().__init__(f"unable to parse date: {value!r}")
        self.value = value


__all__ = [
    "ConfigError",
    "DateUnparseable",
    "FeedFilterError",
    "FeedStatusError",
    "FetchError",
    "ParseError",
]
