"""Summary statistics for an OHLCV time series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PerformanceSummary:
    """Headline numbers for a price series.

    Prices missing from a point count as zero.
    """

    current_price: float
    open_price: float
    day_high: float
    day_low: float
    period_high: float
    period_low: float
    price_change: float
    price_change_percent: float
    volume: int
    avg_volume: int
    is_positive: bool
    latest_date: str
    data_points: int


def _price(point: dict[str, Any], key: str) -> float:
    value = point.get(key)
    return value if isinstance(value, float) else 0.0


def _volume(point: dict[str, Any]) -> int:
    value = point.get("volume")
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def summarize_performance(points: list[dict[str, Any]]) -> PerformanceSummary | None:
    """Summarize chart points ordered oldest first.

    Args:
        points: Output of the chart projection.

    Returns:
        The summary, or None for an empty series.
    """
    if not points:
        return None

    latest = points[-1]
    oldest = points[0]
    latest_close = _price(latest, "close")
    oldest_close = _price(oldest, "close")

    price_change = latest_close - oldest_close
    change_percent = price_change / oldest_close * 100 if oldest_close > 0 else 0.0
    total_volume = sum(_volume(p) for p in points)

    return PerformanceSummary(
        current_price=latest_close,
        open_price=_price(latest, "open"),
        day_high=_price(latest, "high"),
        day_low=_price(latest, "low"),
        period_high=max(_price(p, "high") for p in points),
        period_low=min(_price(p, "low") for p in points),
        price_change=price_change,
        price_change_percent=change_percent,
        volume=_volume(latest),
        avg_volume=round(total_volume / len(points)),
        is_positive=price_change >= 0,
        latest_date=str(latest.get("date", "")),
        data_points=len(points),
    )
