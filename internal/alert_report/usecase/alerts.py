"""Alert list operations: filters, sort orders, paging, related alerts."""

from datetime import datetime
from typing import Optional, Sequence

from internal.model import Alert, Post, Scope, ScopeType, SCOPE_SPECS
from internal.alert_engine import group_posts
from internal.alert_report.constant import RELATED_SORT_KEYS, SORT_SCORE
from internal.alert_report.type import HistoryEntry, Query, Window
from utils.time_utils import EPOCH

_SORTERS = {
    "severity": lambda alert: alert.severity.weight,
    "priority": lambda alert: alert.priority or 0,
    "recent": lambda alert: alert.last_seen_at or EPOCH,
    "volume": lambda alert: alert.metrics.volume_current,
    "risk": lambda alert: alert.metrics.risk_score,
    "impact": lambda alert: alert.metrics.impact_ratio,
}


def filter_alerts(alerts: Sequence[Alert], query: Query) -> list[Alert]:
    return [
        alert
        for alert in alerts
        if (not query.severity or alert.severity.value in query.severity)
        and (not query.status or alert.status.value in query.status)
    ]


def sort_alerts(alerts: Sequence[Alert], sort_key: Optional[str]) -> list[Alert]:
    """Stable descending sort; "score" or an unknown key keeps engine order."""
    key = _SORTERS.get(sort_key or SORT_SCORE)
    if key is None:
        return list(alerts)
    return sorted(alerts, key=key, reverse=True)


def paginate(alerts: Sequence[Alert], cursor: int, limit: int) -> tuple[list[Alert], Optional[str]]:
    page = list(alerts[cursor : cursor + limit])
    next_cursor = str(cursor + limit) if cursor + limit < len(alerts) else None
    return page, next_cursor


def build_parent_index(posts: Sequence[Post]) -> dict[Scope, Scope]:
    """Parent scope of every nested scope present in posts."""
    index: dict[Scope, Scope] = {}
    for spec in SCOPE_SPECS:
        if spec.parent_type is None:
            continue
        for scope_id, group in group_posts(posts, spec.key).items():
            parent = spec.parent_of(group)
            if parent is not None:
                index[Scope(spec.type, scope_id)] = parent
    return index


def _scope_of(alert: Alert) -> Scope:
    return Scope(ScopeType(alert.scope_type), alert.scope_id)


def related_alerts(
    alert: Alert,
    alerts: Sequence[Alert],
    parent_index: dict[Scope, Scope],
    sort_key: Optional[str],
    limit: int,
) -> list[Alert]:
    """Alerts of the same scope type, plus direct parent and children."""
    scope = _scope_of(alert)
    parent = parent_index.get(scope)
    related = []
    for item in alerts:
        if item.id == alert.id:
            continue
        item_scope = _scope_of(item)
        if (
            item.scope_type == alert.scope_type
            or parent_index.get(item_scope) == scope
            or (parent is not None and item_scope == parent)
        ):
            related.append(item)
    if sort_key not in RELATED_SORT_KEYS:
        sort_key = SORT_SCORE
    return sort_alerts(related, sort_key)[:limit]


def _history_entry(alert: Alert, start: datetime, end: datetime) -> HistoryEntry:
    return HistoryEntry(
        window_start=start,
        window_end=end,
        severity=alert.severity,
        status=alert.status,
        metrics=alert.metrics,
        signals=list(alert.signals),
    )


def build_history(alert: Alert, prev_alerts: Sequence[Alert], window: Window) -> list[HistoryEntry]:
    """Previous-window snapshot (when the alert fired then too) and the current one."""
    history = []
    previous = next((item for item in prev_alerts if item.id == alert.id), None)
    if previous is not None:
        history.append(_history_entry(previous, window.prev_start, window.prev_end))
    history.append(_history_entry(alert, window.start, window.end))
    return history


__all__ = [
    "filter_alerts",
    "sort_alerts",
    "paginate",
    "build_parent_index",
    "related_alerts",
    "build_history",
]
