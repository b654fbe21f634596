"""pyjson2widget - Discover, project and format fields of arbitrary JSON API payloads."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyjson2widget")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from typing import Any

from pyjson2widget._constants import DEFAULT_MAX_FIELDS
from pyjson2widget._errors import (
    InvalidFieldFormatError,
    InvalidFieldPathError,
    Json2WidgetError,
    UnsupportedDisplayModeError,
)
from pyjson2widget._json import ABSENT, Absent, JSONValue
from pyjson2widget.cache import CacheEntry, TTLCache
from pyjson2widget.classify import classify, default_format
from pyjson2widget.discovery import discover
from pyjson2widget.formatting import (
    DateStyle,
    FieldFormat,
    FormatKind,
    format_value,
    get_format_preview,
)
from pyjson2widget.paths import (
    FieldPath,
    parse_field_path,
    resolve,
    resolve_in_context,
    sample_value,
)
from pyjson2widget.performance import PerformanceSummary, summarize_performance
from pyjson2widget.projectors import DisplayMode, Row, column_label, get_projector, has_ohlc
from pyjson2widget.schema import FieldSchema, Schema

__all__ = [
    "ABSENT",
    "Absent",
    "CacheEntry",
    "DateStyle",
    "DisplayMode",
    "FieldFormat",
    "FieldPath",
    "FieldSchema",
    "FormatKind",
    "InvalidFieldFormatError",
    "InvalidFieldPathError",
    "JSONValue",
    "Json2WidgetError",
    "PerformanceSummary",
    "Schema",
    "TTLCache",
    "UnsupportedDisplayModeError",
    "classify",
    "column_label",
    "default_format",
    "discover",
    "format_value",
    "get_format_preview",
    "get_projector",
    "has_ohlc",
    "infer_schema",
    "parse_field_path",
    "project",
    "resolve",
    "resolve_in_context",
    "sample_value",
    "summarize_performance",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def project(
    document: Any,
    fields: list[str],
    mode: str = DisplayMode.TABLE,
    **limits: Any,
) -> list[Row]:
    """Project a document into rows, card entries or chart points.

    Args:
        document: A parsed JSON value, or None when nothing was fetched.
        fields: Selected field paths, in display order.
        mode: Display mode: "table", "card" or "chart".
        **limits: Projector limits (``max_rows``, ``max_fields``, ``max_points``).

    Returns:
        Renderer-ready dicts. Empty when the document has no usable structure.

    Raises:
        UnsupportedDisplayModeError: If the display mode is unknown.
    """
    projector = get_projector(mode, **limits)
    if document is None:
        return []
    return projector.project(document, list(fields))


def infer_schema(document: Any, *, max_fields: int = DEFAULT_MAX_FIELDS) -> Schema:
    """Discover the fields of a sample document and infer a format for each.

    Args:
        document: A parsed JSON value.
        max_fields: Maximum number of fields discovered.

    Returns:
        Schema of discovered fields in priority order.
    """
    fields = []
    for path in discover(document, max_fields=max_fields):
        sample = sample_value(document, path)
        if sample is ABSENT:
            sample = None
        fields.append(FieldSchema(path=path, kind=classify(path, sample), sample=sample))
    return Schema(fields)
