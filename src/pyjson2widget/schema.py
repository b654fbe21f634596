"""Inferred field schema for a sample document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pyjson2widget.formatting import FieldFormat, FormatKind


@dataclass(frozen=True)
class FieldSchema:
    """A discovered field with its inferred format kind."""

    path: str
    kind: FormatKind = FormatKind.TEXT
    sample: Any = field(default=None, compare=False)

    @property
    def default_format(self) -> FieldFormat:
        return FieldFormat(kind=self.kind)


class Schema:
    """Ordered discovered fields with O(1) path lookup."""

    def __init__(self, fields: list[FieldSchema]) -> None:
        self._fields = list(fields)
        self._index: dict[str, FieldSchema] = {f.path: f for f in fields}

    @property
    def fields(self) -> list[FieldSchema]:
        return list(self._fields)

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self._fields]

    def find_field(self, path: str) -> FieldSchema | None:
        return self._index.get(path)

    def default_formats(self) -> dict[str, FieldFormat]:
        return {f.path: f.default_format for f in self._fields}

    def __len__(self) -> int:
        return len(self._fields)
