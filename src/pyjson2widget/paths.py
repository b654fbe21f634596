"""Field path parsing and resolution.

A field path addresses a value inside a JSON document. Plain paths are
dot-separated property names (``quote.price``). Segments may be empty, so
every JSON key, including ``""`` and ``Vol.``, has a path. A path containing
a ``*`` segment (``Time Series (Daily).*.4. close``) names a key found in
every child record of a map; at resolution time only the text after the
first ``*.`` is used, as a literal key looked up on a caller-supplied
context record.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from lark import Lark, Transformer

from pyjson2widget._errors import ERR_MSG_INVALID_FIELD_PATH, InvalidFieldPathError
from pyjson2widget._json import ABSENT, first_value

WILDCARD = "*"

_GRAMMAR = r"""
    path: (KEY | WILDCARD | DOT)*

    DOT: "."
    WILDCARD: "*"
    KEY: /(?!\*(?:\.|$))[^.]+/
"""


class _SegmentCollector(Transformer):
    """Splits the token stream on dots into segment strings.

    Adjacent dots and leading or trailing dots produce empty segments.
    """

    def path(self, children: list[Any]) -> list[str]:
        segments = [""]
        for token in children:
            if token.type == "DOT":
                segments.append("")
            else:
                segments[-1] += str(token)
        return segments


_parser = Lark(_GRAMMAR, start="path", parser="lalr", transformer=_SegmentCollector())


@dataclass(frozen=True)
class FieldPath:
    """A parsed field path."""

    raw: str
    segments: tuple[str, ...]

    @property
    def wildcard_index(self) -> int | None:
        try:
            return self.segments.index(WILDCARD)
        except ValueError:
            return None

    @property
    def is_wildcard(self) -> bool:
        return self.wildcard_index is not None

    @property
    def prefix_segments(self) -> tuple[str, ...]:
        """Segments before the wildcard (all segments for a plain path)."""
        index = self.wildcard_index
        return self.segments if index is None else self.segments[:index]

    @property
    def prefix(self) -> str:
        return ".".join(self.prefix_segments)

    @property
    def suffix(self) -> str:
        """The text after the first ``*.``, taken as one literal key.

        Empty for a plain path.
        """
        index = self.wildcard_index
        if index is None:
            return ""
        return ".".join(self.segments[index + 1:])

    @property
    def leaf(self) -> str:
        """The name a field is displayed and classified by."""
        if self.is_wildcard:
            return self.suffix
        # Trailing dots belong to the last key ("quote.Vol." -> "Vol.").
        trimmed = self.raw.rstrip(".")
        return trimmed.rsplit(".", 1)[-1] + self.raw[len(trimmed):]

    def __str__(self) -> str:
        return self.raw


@lru_cache(maxsize=1024)
def parse_field_path(path: str) -> FieldPath:
    """Parse a field path string.

    Args:
        path: Dotted path, optionally with one ``*`` segment.

    Returns:
        The parsed FieldPath.

    Raises:
        InvalidFieldPathError: If the path is not a string or ends in a
            wildcard with nothing to look up.
    """
    if not isinstance(path, str):
        raise InvalidFieldPathError(
            ERR_MSG_INVALID_FIELD_PATH,
            f"field path must be a string, got {path!r}",
        )
    segments = tuple(_parser.parse(path))
    field_path = FieldPath(raw=path, segments=segments)
    if field_path.wildcard_index == len(segments) - 1:
        raise InvalidFieldPathError(
            ERR_MSG_INVALID_FIELD_PATH,
            f"wildcard in field path {path!r} is not followed by a key",
        )
    return field_path


def try_parse_field_path(path: Any) -> FieldPath | None:
    """Like parse_field_path, but returns None instead of raising."""
    if isinstance(path, FieldPath):
        return path
    if not isinstance(path, str):
        return None
    try:
        return parse_field_path(path)
    except InvalidFieldPathError:
        return None


def _as_index(segment: str) -> int | None:
    if segment.isdecimal() and segment.isascii() and (segment == "0" or not segment.startswith("0")):
        return int(segment)
    return None


def _walk(node: Any, segments: tuple[str, ...]) -> Any:
    """Fold property access over ``segments``.

    Object keys that themselves contain dots (``1. open``) are matched by
    joining consecutive segments when a single segment is not a key.
    """
    i = 0
    while i < len(segments):
        if isinstance(node, dict):
            key = segments[i]
            i += 1
            while key not in node and i < len(segments):
                key = f"{key}.{segments[i]}"
                i += 1
            if key not in node:
                return ABSENT
            node = node[key]
        elif isinstance(node, list):
            index = _as_index(segments[i])
            if index is None or index >= len(node):
                return ABSENT
            node = node[index]
            i += 1
        else:
            return ABSENT
    return node


def resolve_in_context(context: Any, key: str) -> Any:
    """Look ``key`` up directly on the active record ``context``."""
    if isinstance(context, dict):
        return context.get(key, ABSENT)
    if isinstance(context, list):
        index = _as_index(key)
        if index is not None and index < len(context):
            return context[index]
    return ABSENT


def resolve(document: Any, path: str | FieldPath, context: Any = ABSENT) -> Any:
    """Resolve a field path against a document.

    Plain paths are read from ``document``. Wildcard paths ignore their prefix
    and read the suffix key from ``context``, the record currently being
    rendered (a row of a table, an entry of a time series).

    Returns:
        The value found (possibly ``None`` for JSON null) or ABSENT. Never
        raises: a malformed path resolves to ABSENT.
    """
    field_path = try_parse_field_path(path)
    if field_path is None:
        return ABSENT

    if field_path.is_wildcard:
        return resolve_in_context(context, field_path.suffix)
    return _walk(document, field_path.segments)


def sample_value(document: Any, path: str | FieldPath) -> Any:
    """Resolve a discovered field path against the sample document it came from.

    A bare array root is descended to element 0, and a wildcard path uses the
    first record of its prefix map as context.
    """
    field_path = try_parse_field_path(path)
    if field_path is None:
        return ABSENT

    node = document
    while isinstance(node, list):
        if not node:
            return ABSENT
        node = node[0]

    if not field_path.is_wildcard:
        return _walk(node, field_path.segments)

    container = _walk(node, field_path.prefix_segments)
    if not isinstance(container, dict):
        return ABSENT
    return resolve_in_context(first_value(container), field_path.suffix)
