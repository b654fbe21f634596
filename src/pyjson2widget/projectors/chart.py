"""Time-series (chart) projection."""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from pyjson2widget import _dates
from pyjson2widget._constants import DEFAULT_SERIES_MAX_POINTS
from pyjson2widget._json import find_series_map
from pyjson2widget.projectors._base import DisplayMode, Projector, Row, series_record

logger = logging.getLogger(__name__)

OHLC_KEYS = ("open", "high", "low", "close")
VOLUME_KEY = "volume"

# "1. open" -> "open"
_ORDINAL_PREFIX_RE = re.compile(r"^\s*\d+\.\s*")
_LEADING_FLOAT_RE = re.compile(r"\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")
_LEADING_INT_RE = re.compile(r"\s*[-+]?\d+")


def bar_key(sub_key: str) -> str | None:
    """Map a series sub-key to its OHLCV name, or None for other keys."""
    name = _ORDINAL_PREFIX_RE.sub("", sub_key).strip().lower()
    if name in OHLC_KEYS or name == VOLUME_KEY:
        return name
    return None


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        match = _LEADING_FLOAT_RE.match(value)
        if match:
            return float(match.group(0))
    return None


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            return int(match.group(0))
    return None


def to_point(date_key: str, entry: Any) -> Row:
    """Build a chart point from one time-series entry.

    Raw sub-keys are kept; conventional OHLCV sub-keys additionally appear as
    numeric ``open``/``high``/``low``/``close`` (float) and ``volume`` (int).
    """
    point = series_record(date_key, entry)
    parsed = _dates.parse_date(date_key)
    point["timestamp"] = _dates.epoch_millis(parsed) if parsed is not None else None

    if isinstance(entry, dict):
        for sub_key, value in entry.items():
            name = bar_key(sub_key)
            if name is None:
                continue
            number = _to_int(value) if name == VOLUME_KEY else _to_float(value)
            if number is not None:
                point[name] = number
    return point


def has_ohlc(points: list[Row]) -> bool:
    """Whether the series can be drawn as candlesticks."""
    if not points:
        return False
    first = points[0]
    return all(isinstance(first.get(key), float) for key in OHLC_KEYS)


class ChartProjector(Projector):
    """Projects the document's time-series map into points, oldest first.

    The map's natural order is latest first; the first ``max_points``
    entries are kept and then reversed.
    """

    mode = DisplayMode.CHART

    def __init__(self, max_points: int = DEFAULT_SERIES_MAX_POINTS) -> None:
        self._max_points = max_points

    def project(self, document: Any, fields: list[str]) -> list[Row]:
        series = find_series_map(document)
        if series is None:
            logger.debug("no time series found in %s document", type(document).__name__)
            return []
        _, entries = series
        items = list(entries.items())[: self._max_points]
        items.reverse()
        return [to_point(key, entry) for key, entry in items]
