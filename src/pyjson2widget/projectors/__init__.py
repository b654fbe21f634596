"""Display-mode projectors turning documents into renderer-ready rows."""

from typing import Any

from pyjson2widget._errors import ERR_MSG_UNSUPPORTED_DISPLAY_MODE, UnsupportedDisplayModeError
from pyjson2widget.projectors._base import DisplayMode, Projector, Row, column_label
from pyjson2widget.projectors.card import CardProjector
from pyjson2widget.projectors.chart import ChartProjector, has_ohlc
from pyjson2widget.projectors.table import TableProjector

__all__ = [
    "CardProjector",
    "ChartProjector",
    "DisplayMode",
    "Projector",
    "Row",
    "TableProjector",
    "column_label",
    "get_projector",
    "has_ohlc",
]

_REGISTRY: dict[str, type[Projector]] = {
    DisplayMode.TABLE: TableProjector,
    DisplayMode.CARD: CardProjector,
    DisplayMode.CHART: ChartProjector,
}


def get_projector(name: str, **limits: Any) -> Projector:
    """Get a projector instance by display mode name.

    Args:
        name: Display mode ("table", "card" or "chart").
        **limits: Forwarded to the projector (``max_rows``, ``max_fields``,
            ``max_points``).

    Returns:
        A Projector instance.

    Raises:
        UnsupportedDisplayModeError: If the display mode is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise UnsupportedDisplayModeError(
            ERR_MSG_UNSUPPORTED_DISPLAY_MODE,
            f"unknown display mode: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}",
        )
    return cls(**limits)
