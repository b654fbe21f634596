"""Field discovery for JSON documents of unknown shape.

Walks a sample document depth-first and lists the paths a user can pick as
widget fields. Arrays contribute the fields of their first element only. An
object whose first value is itself an object is taken to be a map of
homogeneous records (e.g. a date-keyed time series); it contributes one
wildcard path per key of its first record instead of one field set per entry.

The result is ordered in three bands: time-series fields first, then other
fields, then metadata fields, and capped at ``max_fields`` entries.
"""

from __future__ import annotations

import logging
from typing import Any

from pyjson2widget._constants import DEFAULT_MAX_FIELDS
from pyjson2widget._json import first_value

logger = logging.getLogger(__name__)

TIME_SERIES_MARKER = "Time Series"
WILDCARD_MARKER = "*."
METADATA_MARKER = "Meta Data"


def _join(prefix: str | None, key: str) -> str:
    return key if prefix is None else f"{prefix}.{key}"


def _collect(node: Any, prefix: str | None, out: list[str]) -> None:
    if isinstance(node, list):
        if node:
            _collect(node[0], prefix, out)
        return
    if not isinstance(node, dict):
        return

    for key, value in node.items():
        path = _join(prefix, key)
        if isinstance(value, dict):
            record = first_value(value)
            if isinstance(record, dict):
                out.extend(f"{path}.*.{sub_key}" for sub_key in record)
            else:
                _collect(value, path, out)
        else:
            out.append(path)


def _is_series_field(path: str) -> bool:
    return TIME_SERIES_MARKER in path or WILDCARD_MARKER in path


def prioritize(paths: list[str]) -> list[str]:
    """Order field paths as time-series, other, then metadata fields.

    Each path lands in exactly one band; order within a band is preserved.
    """
    series: list[str] = []
    other: list[str] = []
    meta: list[str] = []
    for path in paths:
        if _is_series_field(path):
            series.append(path)
        elif METADATA_MARKER in path:
            meta.append(path)
        else:
            other.append(path)
    return series + other + meta


def discover(document: Any, *, max_fields: int = DEFAULT_MAX_FIELDS) -> list[str]:
    """Enumerate the addressable fields of a sample document.

    Args:
        document: A parsed JSON value. ``None`` and primitives yield no fields.
        max_fields: Maximum number of paths returned.

    Returns:
        Ordered, deduplicated field paths.
    """
    found: list[str] = []
    _collect(document, None, found)
    unique = list(dict.fromkeys(found))
    fields = prioritize(unique)[:max_fields]
    logger.debug("discovered %d fields (%d before truncation)", len(fields), len(unique))
    return fields
