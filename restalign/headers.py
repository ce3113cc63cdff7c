"""Parse the ``restHeaders`` property into an ordered header mapping."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = ","
KEY_VALUE_SEPARATOR = ":"


def parse_headers(value: str | None) -> dict[str, str]:
    """
    Parse ``key:value`` entries separated by commas.

    Each entry is split on its first colon only, so values may contain colons
    (``Authorization:Basic a:b``). An entry without a colon maps to the empty
    string. Entries with a blank key are dropped; otherwise keys and values are
    kept verbatim, surrounding whitespace included. When a key repeats, the
    last value wins but the key keeps the position of its first occurrence.

    There is no escaping: a comma inside a value splits the entry.
    """
    headers: dict[str, str] = {}
    if value is None or not value.strip():
        return headers

    for entry in value.split(ENTRY_SEPARATOR):
        key, _, raw = entry.partition(KEY_VALUE_SEPARATOR)
        if not key.strip():
            if entry.strip():
                logger.debug("Dropping header entry with empty key: %r", entry)
            continue
        headers[key] = raw

    return headers
