"""Table projection."""

from __future__ import annotations

import logging
from typing import Any

from pyjson2widget._constants import DEFAULT_TABLE_MAX_ROWS
from pyjson2widget._json import ABSENT, find_series_map, first_array
from pyjson2widget.paths import resolve
from pyjson2widget.projectors._base import DisplayMode, Projector, Row, series_record

logger = logging.getLogger(__name__)


class TableProjector(Projector):
    """Projects a document into table rows keyed by field path.

    Rows come from, in order of preference: an array document, a
    homogeneous date-keyed map (one row per entry, with its key as ``date``),
    the first array-valued property, or the document itself as a single row.
    """

    mode = DisplayMode.TABLE

    def __init__(self, max_rows: int = DEFAULT_TABLE_MAX_ROWS) -> None:
        self._max_rows = max_rows

    def source_rows(self, document: Any) -> list[Any]:
        if isinstance(document, list):
            return document[: self._max_rows]
        if not isinstance(document, dict):
            return []

        series = find_series_map(document)
        if series is not None:
            _, entries = series
            items = list(entries.items())[: self._max_rows]
            return [series_record(key, entry) for key, entry in items]

        array = first_array(document)
        if array is not None:
            return array[: self._max_rows]
        return [document]

    def project(self, document: Any, fields: list[str]) -> list[Row]:
        rows = self.source_rows(document)
        if not rows:
            logger.debug("no table rows found in %s document", type(document).__name__)
        projected: list[Row] = []
        for row in rows:
            cells: Row = {}
            for field in fields:
                value = resolve(row, field, context=row)
                cells[field] = None if value is ABSENT else value
            projected.append(cells)
        return projected
