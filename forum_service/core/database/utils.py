"""Identifier utilities.

Forum entities use 24-hex-character identifiers laid out like a document
store object id: a 4-byte big-endian Unix timestamp, a 5-byte per-process
random value and a 3-byte counter. The counter starts at zero and is shared by
every timestamp, so ids minted in the same second by one process sort in
creation order until the counter wraps after 2**24 ids. Ids from different
processes in the same second are ordered by their random bytes, not by time.
"""

from __future__ import annotations

import itertools
import os
import re
import time
from typing import Any

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

_PROCESS_UNIQUE = os.urandom(5)
_counter = itertools.count()


def generate_object_id(timestamp: float | None = None) -> str:
    """Generate a new time-ordered 24-hex identifier.

    Args:
        timestamp: Optional Unix timestamp to embed (defaults to now).

    Returns:
        Lowercase 24-character hex string.

    Example:
        first = generate_object_id()
        second = generate_object_id()
        assert first < second
    """
    seconds = int(time.time() if timestamp is None else timestamp)
    counter = next(_counter) & 0xFFFFFF
    raw = seconds.to_bytes(4, "big") + _PROCESS_UNIQUE + counter.to_bytes(3, "big")
    return raw.hex()


def is_object_id(value: Any) -> bool:
    """Return True if ``value`` is a string shaped like a 24-hex identifier."""
    return isinstance(value, str) and OBJECT_ID_PATTERN.fullmatch(value) is not None


def normalize_object_id(value: str) -> str:
    """Lowercase an identifier so lexical comparisons match stored ids."""
    return value.lower()
