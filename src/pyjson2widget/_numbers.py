"""Numeric extraction and en-US number rendering."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from pyjson2widget._json import to_display_string

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "CNY": "CN¥",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "HKD": "HK$",
    "MXN": "MX$",
    "BRL": "R$",
    "TWD": "NT$",
    "KRW": "₩",
    "ILS": "₪",
    "VND": "₫",
    "PHP": "₱",
}


def extract_number(value: Any) -> Decimal | None:
    """Read a number out of a JSON value.

    Numbers are used as-is. Anything else is converted to text, every
    character other than digits, ``.`` and ``-`` is dropped, and the longest
    leading number is read (``"$1,234.50"`` -> ``1234.50``).

    Returns:
        The number, or None when nothing numeric remains.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return Decimal(str(value))

    stripped = _NON_NUMERIC_RE.sub("", to_display_string(value))
    match = _LEADING_NUMBER_RE.match(stripped)
    if match is None:
        return None
    return Decimal(match.group(0))


def _quantize(number: Decimal, places: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(28, number.adjusted() + places + 2)
        return number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def fixed(number: Decimal, places: int) -> str:
    """Render with exactly ``places`` decimals and no grouping."""
    return f"{_quantize(number, places):.{places}f}"


def grouped(number: Decimal, min_places: int, max_places: int) -> str:
    """Render with thousands separators and between min and max decimals."""
    max_places = max(max_places, min_places)
    text = f"{_quantize(number, max_places):,.{max_places}f}"
    if "." not in text:
        return text
    whole, fraction = text.split(".")
    fraction = fraction.rstrip("0").ljust(min_places, "0")
    return f"{whole}.{fraction}" if fraction else whole


def currency(number: Decimal, code: str, places: int) -> str:
    """Render a currency amount the way en-US browsers do (``-$1,234.50``)."""
    code = code.upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code}\u00a0")
    amount = grouped(abs(number), places, places)
    # A negative amount keeps its sign even when it rounds to zero ("-$0.00").
    sign = "-" if number < 0 else ""
    return f"{sign}{symbol}{amount}"
