"""Loading of the optional author allow-list."""

from __future__ import annotations

import logging
from typing import FrozenSet

LOGGER = logging.getLogger(__name__)


def parse_allow_list(text: str) -> FrozenSet[str]:
    """Parse newline-separated author names.

    Lines are trimmed; blank lines and ``#`` comments are skipped. Names are
    kept verbatim, so matching stays case-sensitive.
    """

    authors = set()
    for line in text.splitlines():
        name = line.strip()
        if not name or name.startswith("#"):
            continue
        authors.add(name)
    LOGGER.debug("Loaded %d allowed authors", len(authors))
    return frozenset(authors)


__all__ = ["parse_allow_list"]
