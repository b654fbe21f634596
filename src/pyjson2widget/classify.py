"""Heuristic field type classification.

Only supplies the initial format of a newly selected field; users override it.
"""

from __future__ import annotations

import math
from typing import Any

from pyjson2widget.formatting import FieldFormat, FormatKind
from pyjson2widget.paths import try_parse_field_path

CURRENCY_HINTS = ("price", "cost", "amount", "value", "usd", "dollar")
PERCENTAGE_HINTS = ("percent", "rate", "ratio", "change")
DATE_HINTS = ("date", "time", "created", "updated")


def leaf_name(field_path: str) -> str:
    """Return the wildcard suffix or last segment of a field path."""
    parsed = try_parse_field_path(field_path)
    if parsed is None:
        return str(field_path)
    return parsed.leaf


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str) and "_" not in value:
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def classify(field_path: str, sample_value: Any) -> FormatKind:
    """Infer the display format kind of a field.

    Name hints are checked first (currency, then percentage, then date);
    otherwise a numeric sample means ``number`` and anything else ``text``.
    """
    name = leaf_name(field_path).lower()

    if any(hint in name for hint in CURRENCY_HINTS):
        return FormatKind.CURRENCY
    if any(hint in name for hint in PERCENTAGE_HINTS):
        return FormatKind.PERCENTAGE
    if any(hint in name for hint in DATE_HINTS):
        return FormatKind.DATE
    if _is_numeric(sample_value):
        return FormatKind.NUMBER
    return FormatKind.TEXT


def default_format(field_path: str, sample_value: Any) -> FieldFormat:
    return FieldFormat(kind=classify(field_path, sample_value))
