"""Tolerant parsing of the timestamp encodings found in RSS feeds.

Publishers disagree on how ``pubDate`` is written, so a value is tried against
a fixed, ordered list of layouts and the first match wins. There is no
fallback to the current time: a value that matches nothing is reported as
unparseable.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Callable, List, Optional, Tuple

from dateutil import tz

from .errors import DateUnparseable

LOGGER = logging.getLogger(__name__)

_HOUR = 3600

# RFC 822 section 5 zone names; anything else alphabetic is read as UTC.
ZONE_OFFSETS = {
    "UT": tz.UTC,
    "UTC": tz.UTC,
    "GMT": tz.UTC,
    "Z": tz.UTC,
    "EST": tz.tzoffset("EST", -5 * _HOUR),
    "EDT": tz.tzoffset("EDT", -4 * _HOUR),
    "CST": tz.tzoffset("CST", -6 * _HOUR),
    "CDT": tz.tzoffset("CDT", -5 * _HOUR),
    "MST": tz.tzoffset("MST", -7 * _HOUR),
    "MDT": tz.tzoffset("MDT", -6 * _HOUR),
    "PST": tz.tzoffset("PST", -8 * _HOUR),
    "PDT": tz.tzoffset("PDT", -7 * _HOUR),
}

RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"
RFC1123 = "%a, %d %b %Y %H:%M:%S"
RFC822Z = "%d %b %y %H:%M %z"
RFC822 = "%d %b %y %H:%M"
ISO8601 = "%Y-%m-%dT%H:%M:%S%z"
ISO8601_FRACTION = "%Y-%m-%dT%H:%M:%S.%f%z"
DATE_ONLY = "%Y-%m-%d"


def _zone(name: str) -> Optional[tzinfo]:
    if not name.isalpha():
        return None
    return ZONE_OFFSETS.get(name.upper(), tz.UTC)


def _with_offset(layout: str) -> Callable[[str], datetime]:
    def parse(value: str) -> datetime:
        return datetime.strptime(value, layout)

    return parse


def _with_zone_name(layout: str) -> Callable[[str], datetime]:
    def parse(value: str) -> datetime:
        head, _, name = value.rpartition(" ")
        zone = _zone(name)
        if not head or zone is None:
            raise ValueError(f"no zone abbreviation in {value!r}")
        return datetime.strptime(head, layout).replace(tzinfo=zone)

    return parse


def _iso(value: str) -> datetime:
    layout = ISO8601_FRACTION if "." in value else ISO8601
    return datetime.strptime(value, layout)


def _date_only(value: str) -> datetime:
    return datetime.strptime(value, DATE_ONLY).replace(tzinfo=tz.UTC)


LAYOUTS: List[Tuple[str, Callable[[str], datetime]]] = [
    ("RFC1123Z", _with_offset(RFC1123Z)),
    ("RFC1123", _with_zone_name(RFC1123)),
    ("RFC822Z", _with_offset(RFC822Z)),
    ("RFC822", _with_zone_name(RFC822)),
    ("ISO8601", _iso),
    ("DATE", _date_only),
]


def parse_date(value: Optional[str]) -> datetime:
    """Parse ``value`` into a timezone-aware datetime.

    Raises:
        DateUnparseable: if no known layout matches the trimmed value.
    """

    if not value or not value.strip():
        raise DateUnparseable(value)

    text = value.strip()
    for name, parser in LAYOUTS:
        try:
            parsed = parser(text)
        except ValueError:
            continue
        LOGGER.debug("Parsed %r as %s", text, name)
        return parsed
    raise DateUnparseable(value)


def try_parse_date(value: Optional[str]) -> Optional[datetime]:
    """Return the parsed datetime, or ``None`` when the value is unparseable."""

    try:
        return parse_date(value)
    except DateUnparseable:
        return None


__all__ = ["LAYOUTS", "ZONE_OFFSETS", "parse_date", "try_parse_date"]
