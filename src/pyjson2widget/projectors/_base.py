"""Abstract base class for display-mode projectors."""

from __future__ import annotations

import enum
import re
from abc import ABC, abstractmethod
from typing import Any

from pyjson2widget.paths import try_parse_field_path

Row = dict[str, Any]
"""One projected row, card entry or chart point."""

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class DisplayMode(enum.StrEnum):
    TABLE = "table"
    CARD = "card"
    CHART = "chart"


class Projector(ABC):
    """Turns a document and a field list into renderer-ready rows.

    Projections are pure: the same document, fields and limits always give
    the same result. When a document has no usable structure the projection
    is an empty list.
    """

    mode: DisplayMode

    @abstractmethod
    def project(self, document: Any, fields: list[str]) -> list[Row]: ...


def column_label(field: str) -> str:
    """Human label for a field: ``quote.changePercent`` -> ``Change Percent``."""
    parsed = try_parse_field_path(field)
    name = parsed.leaf if parsed is not None else str(field)
    name = _CAMEL_BOUNDARY_RE.sub(" ", name).replace("_", " ").strip()
    if not name:
        return str(field)
    return name[0].upper() + name[1:]


def series_record(date_key: str, entry: Any) -> Row:
    """A time-series entry as a flat record with a synthetic ``date`` key."""
    record: Row = {"date": date_key}
    if isinstance(entry, dict):
        record.update(entry)
    return record
