"""Card projection."""

from __future__ import annotations

import logging
from typing import Any

from pyjson2widget._constants import DEFAULT_CARD_MAX_FIELDS
from pyjson2widget._json import ABSENT, find_series_map, first_value
from pyjson2widget.paths import resolve, try_parse_field_path
from pyjson2widget.projectors._base import (
    DisplayMode,
    Projector,
    Row,
    column_label,
    series_record,
)

logger = logging.getLogger(__name__)

SOURCE_KEY_HINTS = ("data", "quote", "price")


def _has_wildcard_field(fields: list[str]) -> bool:
    for field in fields:
        parsed = try_parse_field_path(field)
        if parsed is not None and parsed.is_wildcard:
            return True
    return False


class CardProjector(Projector):
    """Projects a single record into label/value pairs."""

    mode = DisplayMode.CARD

    def __init__(self, max_fields: int = DEFAULT_CARD_MAX_FIELDS) -> None:
        self._max_fields = max_fields

    def source_record(self, document: Any, fields: list[str]) -> Any:
        """Pick the record the card displays.

        An array document shows its first element. When wildcard fields are
        selected, the latest (first) entry of the time-series map is shown
        with its key as ``date``. Otherwise a nested object under a
        data/quote/price key is preferred over the whole document.
        """
        if isinstance(document, list):
            return document[0] if document else ABSENT
        if not isinstance(document, dict):
            return ABSENT

        if _has_wildcard_field(fields):
            series = find_series_map(document)
            if series is not None:
                _, entries = series
                latest_key = next(iter(entries))
                return series_record(latest_key, first_value(entries))

        for key, value in document.items():
            if isinstance(value, dict) and any(hint in key.lower() for hint in SOURCE_KEY_HINTS):
                return value
        return document

    def project(self, document: Any, fields: list[str]) -> list[Row]:
        record = self.source_record(document, fields)
        if record is ABSENT:
            logger.debug("no card record found in %s document", type(document).__name__)
            return []
        cards: list[Row] = []
        for field in fields[: self._max_fields]:
            value = resolve(record, field, context=record)
            cards.append({
                "field": field,
                "label": column_label(field),
                "value": None if value is ABSENT else value,
            })
        return cards
