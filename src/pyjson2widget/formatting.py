"""Per-field value formatting.

``format_value`` is total: every input renders to a string. Empty values
render as ``"-"``, and values that cannot be read as the requested kind fall
back to their plain text form.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from pyjson2widget import _dates, _numbers
from pyjson2widget._constants import DEFAULT_CURRENCY_CODE
from pyjson2widget._errors import (
    ERR_MSG_INVALID_DECIMALS,
    ERR_MSG_INVALID_FORMAT_KIND,
    ERR_MSG_INVALID_FORMAT_OPTION,
    InvalidFieldFormatError,
)
from pyjson2widget._json import ABSENT, to_display_string

EMPTY_DISPLAY = "-"
MAX_DECIMALS = 20


class FormatKind(enum.StrEnum):
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    NUMBER = "number"
    DATE = "date"
    TEXT = "text"


class DateStyle(enum.StrEnum):
    SHORT = "MM/dd/yyyy"
    ISO = "yyyy-MM-dd"
    RELATIVE = "relative"


@dataclass(frozen=True)
class FieldFormat:
    """Display rules for one field.

    Only the options relevant to ``kind`` are consulted: ``currency_code``
    for currency, ``date_style`` for date, ``prefix``/``suffix`` for number.
    """

    kind: FormatKind = FormatKind.TEXT
    decimals: int | None = None
    currency_code: str | None = None
    date_style: str | None = None
    prefix: str = ""
    suffix: str = ""

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "kind", FormatKind(self.kind))
        except ValueError as e:
            raise InvalidFieldFormatError(
                ERR_MSG_INVALID_FORMAT_KIND,
                f"unknown format type {self.kind!r}",
                wrapped=e,
            ) from e
        if self.decimals is not None and (
            isinstance(self.decimals, bool)
            or not isinstance(self.decimals, int)
            or not 0 <= self.decimals <= MAX_DECIMALS
        ):
            raise InvalidFieldFormatError(
                ERR_MSG_INVALID_DECIMALS,
                f"decimals must be an integer between 0 and {MAX_DECIMALS}, got {self.decimals!r}",
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FieldFormat:
        """Build a FieldFormat from a widget configuration mapping.

        Accepts the dashboard's camelCase keys (``type``, ``currency``,
        ``dateFormat``) as well as ``kind``, ``currencyCode`` and ``dateStyle``.

        Raises:
            InvalidFieldFormatError: If the type, decimals or an option is invalid.
        """
        kind = data.get("kind", data.get("type", FormatKind.TEXT))
        options = {
            "currency_code": data.get("currencyCode", data.get("currency")),
            "date_style": data.get("dateStyle", data.get("dateFormat")),
            "prefix": data.get("prefix") or "",
            "suffix": data.get("suffix") or "",
        }
        for name, value in options.items():
            if value is not None and not isinstance(value, str):
                raise InvalidFieldFormatError(
                    ERR_MSG_INVALID_FORMAT_OPTION,
                    f"format option {name!r} must be a string, got {value!r}",
                )
        return cls(kind=kind, decimals=data.get("decimals"), **options)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the dashboard's camelCase configuration keys."""
        data: dict[str, Any] = {"type": str(self.kind)}
        if self.decimals is not None:
            data["decimals"] = self.decimals
        if self.currency_code:
            data["currency"] = self.currency_code
        if self.date_style:
            data["dateFormat"] = self.date_style
        if self.prefix:
            data["prefix"] = self.prefix
        if self.suffix:
            data["suffix"] = self.suffix
        return data


def _is_empty(value: Any) -> bool:
    return value is None or value is ABSENT or (isinstance(value, str) and value == "")


def _format_date(value: Any, text: str, fmt: FieldFormat, now: datetime | None) -> str:
    dt = _dates.parse_date(value)
    if dt is None:
        return text
    if fmt.date_style == DateStyle.ISO:
        return _dates.iso_date(dt)
    if fmt.date_style == DateStyle.RELATIVE:
        return _dates.relative_age(dt, now)
    return _dates.short_date(dt)


def format_value(value: Any, fmt: FieldFormat | None = None, *, now: datetime | None = None) -> str:
    """Render a raw JSON value for display.

    Args:
        value: Resolved field value; ``None``, ABSENT and ``""`` render as ``"-"``.
        fmt: Display rules. Plain text when omitted.
        now: Reference time for relative dates. Defaults to the current time.

    Returns:
        The display string. Never raises.
    """
    if _is_empty(value):
        return EMPTY_DISPLAY

    text = to_display_string(value)
    if fmt is None or fmt.kind == FormatKind.TEXT:
        return text
    if fmt.kind == FormatKind.DATE:
        return _format_date(value, text, fmt, now)

    number = _numbers.extract_number(value)
    if number is None:
        return text

    if fmt.kind == FormatKind.CURRENCY:
        places = 2 if fmt.decimals is None else fmt.decimals
        return _numbers.currency(number, fmt.currency_code or DEFAULT_CURRENCY_CODE, places)

    if fmt.kind == FormatKind.PERCENTAGE:
        # Fractions (0.12) are scaled; values already in percent units (45.2) are not.
        if -1 < number < 1:
            number *= 100
        places = 2 if fmt.decimals is None else fmt.decimals
        return f"{_numbers.fixed(number, places)}%"

    min_places = 0 if fmt.decimals is None else fmt.decimals
    max_places = 2 if fmt.decimals is None else fmt.decimals
    return f"{fmt.prefix}{_numbers.grouped(number, min_places, max_places)}{fmt.suffix}"


def _preview_samples() -> dict[FormatKind, Any]:
    return {
        FormatKind.CURRENCY: 1234.56,
        FormatKind.PERCENTAGE: 0.1234,
        FormatKind.NUMBER: 1234567.89,
        FormatKind.DATE: datetime.now(timezone.utc).isoformat(),
        FormatKind.TEXT: "Sample Text",
    }


def get_format_preview(sample_value: Any, fmt: FieldFormat, *, now: datetime | None = None) -> str:
    """Format ``sample_value``, or a representative value of ``fmt.kind`` when it is missing."""
    if sample_value is None or sample_value is ABSENT:
        sample_value = _preview_samples()[fmt.kind]
    return format_value(sample_value, fmt, now=now)
