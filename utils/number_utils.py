"""Numeric helpers shared by the aggregation and scoring steps.

Inputs arrive from upstream JSON and may contain NaN, Infinity or strings,
so every helper here degrades to 0 instead of raising.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence


def safe_number(value: Any, default: float = 0.0) -> float:
    """Coerce value to a finite float, falling back to default."""
    if isinstance(value, bool) or value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def safe_count(value: Any) -> int:
    """Coerce value to a non-negative integer counter (reach, engagement)."""
    number = safe_number(value)
    if number <= 0:
        return 0
    return int(number)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive numbers, like Math.round.

    Python's round() is banker's rounding, which would make thresholds
    such as round(250 * 0.01) flip between 2 and 3.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def pct_change(current: float, prev: float) -> float:
    """Percentage change with a defined zero baseline.

    prev == 0 yields 0 when current is also 0, otherwise 100.
    """
    if not math.isfinite(current) or not math.isfinite(prev):
        return 0.0
    if prev == 0:
        return 0.0 if current == 0 else 100.0
    return ((current - prev) / abs(prev)) * 100


def median(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return float(ordered[mid])


def mean_std(values: Iterable[float]) -> tuple[float, float]:
    """Mean and sample standard deviation (n - 1, floored at 1)."""
    items = list(values)
    if not items:
        return 0.0, 0.0
    mean = sum(items) / len(items)
    variance = sum((value - mean) ** 2 for value in items) / max(1, len(items) - 1)
    return mean, math.sqrt(variance)


__all__ = [
    "safe_number",
    "safe_count",
    "round_half_up",
    "clamp",
    "pct_change",
    "median",
    "mean_std",
]
