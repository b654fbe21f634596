"""JSON value types and shape detection shared by discovery and projection.

Documents are plain ``json.loads`` output. Shape detection is best-effort:
a map is treated as a collection of homogeneous records by peeking at its
first value only, and arrays are assumed homogeneous by looking at element 0.
"""

from __future__ import annotations

import enum
import json
import re
from typing import Any, Union

JSONValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]


class Absent(enum.Enum):
    """Marker for "no value at this path", distinct from JSON ``null``."""

    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT

_DATE_KEY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def first_value(obj: dict[str, Any]) -> Any:
    """Return the value at the first key of ``obj``, or ABSENT when empty."""
    for value in obj.values():
        return value
    return ABSENT


def is_homogeneous_map(value: Any) -> bool:
    """Check whether ``value`` is an object whose first value is an object.

    Such a map (e.g. a date-keyed time series) is assumed to hold records
    sharing the shape of its first entry.
    """
    return isinstance(value, dict) and isinstance(first_value(value), dict)


def looks_like_date_key(key: str) -> bool:
    return _DATE_KEY_RE.search(key) is not None


def find_series_map(document: Any) -> tuple[str, dict[str, Any]] | None:
    """Find the homogeneous record map among the top-level values of a document.

    A map keyed by date-like strings wins; otherwise the first homogeneous map
    in key order is used.

    Returns:
        ``(key, map)`` or None when the document holds no such map.
    """
    if not isinstance(document, dict):
        return None

    fallback: tuple[str, dict[str, Any]] | None = None
    for key, value in document.items():
        if not is_homogeneous_map(value):
            continue
        if any(looks_like_date_key(sub_key) for sub_key in value):
            return key, value
        if fallback is None:
            fallback = (key, value)
    return fallback


def first_array(obj: dict[str, Any]) -> list[Any] | None:
    """Return the first array-valued property of ``obj``."""
    for value in obj.values():
        if isinstance(value, list):
            return value
    return None


def to_display_string(value: Any) -> str:
    """Render a JSON value as plain text.

    Booleans render as JSON literals, integral floats drop their ``.0`` and
    containers render as compact JSON.
    """
    if value is None or value is ABSENT:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return str(value)
