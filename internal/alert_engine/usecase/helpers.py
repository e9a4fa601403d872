import math
from typing import Callable, Iterable, Optional, Sequence

from internal.model import OVERALL_SCOPE_LABEL, Post, Scope, Signal
from internal.alert_engine.constant import (
    COMPACT_UNITS,
    DEDUP_PARENT_RATIO,
    TITLE_SEPARATOR,
)
from internal.alert_engine.type import ScoredAlert
from internal.window_stats import WindowStats
from utils.number_utils import round_half_up


def _one_decimal(value: float) -> str:
    text = f"{round_half_up(value * 10) / 10:.1f}"
    return text[:-2] if text.endswith(".0") else text


def format_compact(value: float) -> str:
    """Short human number: 950, 1.2 mil, 3.4 M."""
    if not math.isfinite(value):
        return "0"
    magnitude = abs(value)
    sign = "-" if value < 0 else ""
    for unit, suffix in COMPACT_UNITS:
        if magnitude >= unit:
            return f"{sign}{_one_decimal(magnitude / unit)} {suffix}"
    return f"{sign}{_one_decimal(magnitude)}"


def format_signed_compact(value: float) -> str:
    if not math.isfinite(value) or value == 0:
        return "0"
    sign = "+" if value > 0 else "-"
    return f"{sign}{format_compact(abs(value))}"


def build_summary(stats: WindowStats, prev_stats: WindowStats) -> str:
    delta = stats.total - prev_stats.total
    return (
        f"Vol {format_compact(stats.total)}"
        f" · Δ {format_signed_compact(delta)}"
        f" · Neg {round_half_up(stats.negative_share)}%"
        f" · Riesgo {round_half_up(stats.risk_score)}"
    )


def scope_label(scope: Scope) -> str:
    return OVERALL_SCOPE_LABEL if scope.is_overall else scope.id


def build_title(scope: Scope, primary: Signal) -> str:
    return f"{scope_label(scope)}{TITLE_SEPARATOR}{primary.label}"


def group_posts(
    posts: Iterable[Post], key: Callable[[Post], Optional[str]]
) -> dict[str, list[Post]]:
    """Group posts by key in first-seen order, skipping empty keys."""
    groups: dict[str, list[Post]] = {}
    for post in posts:
        value = key(post)
        if not value:
            continue
        groups.setdefault(value, []).append(post)
    return groups


def is_redundant(child: ScoredAlert, parent: Optional[ScoredAlert]) -> bool:
    """A child repeats its parent when both lead with the same signal and
    the parent already scores at least DEDUP_PARENT_RATIO of the child."""
    if parent is None:
        return False
    if parent.primary_signal != child.primary_signal:
        return False
    return not parent.score < child.score * DEDUP_PARENT_RATIO


def dedup_alerts(scored: Sequence[ScoredAlert]) -> list[ScoredAlert]:
    lookup = {item.scope.identity_key: item for item in scored}
    kept = []
    for item in scored:
        parent = lookup.get(item.parent.identity_key) if item.parent else None
        if is_redundant(item, parent):
            continue
        kept.append(item)
    return kept


def rank_alerts(scored: Sequence[ScoredAlert], limit: int) -> list[ScoredAlert]:
    # sorted() is stable: equal scores keep evaluation order
    return sorted(scored, key=lambda item: -item.score)[:limit]


__all__ = [
    "format_compact",
    "format_signed_compact",
    "build_summary",
    "scope_label",
    "build_title",
    "group_posts",
    "is_redundant",
    "dedup_alerts",
    "rank_alerts",
]
