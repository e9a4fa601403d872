"""Aggregates shown around the alert list: rule catalog, timeline, pulse."""

from datetime import datetime, timedelta
from typing import Sequence

from internal.model import Alert, AlertStatus, Severity
from internal.alert_report.constant import MONTH_ABBR, RANGE_SEPARATOR, RULE_CATALOG
from internal.alert_report.type import (
    BaselineStats,
    PulseDeltas,
    PulseStats,
    RuleStat,
    TimelinePoint,
)
from internal.signal_detection import Thresholds
from utils.number_utils import pct_change
from utils.time_utils import day_key, ensure_utc

_INVESTIGATING = (AlertStatus.ACK, AlertStatus.ESCALATED)


def format_day(value: datetime) -> str:
    value = ensure_utc(value)
    return f"{value.day} {MONTH_ABBR[value.month - 1]}"


def format_range(start: datetime, end: datetime) -> str:
    return f"{format_day(start)}{RANGE_SEPARATOR}{format_day(end)}"


def _format_threshold(value: float) -> str:
    return f"{value:g}"


def build_rule_stats(alerts: Sequence[Alert], thresholds: Thresholds) -> list[RuleStat]:
    """Rule catalog with how many alerts currently fire each rule."""
    values = {name: _format_threshold(value) for name, value in thresholds.to_dict().items()}
    counts = {signal_type: 0 for signal_type, _, _ in RULE_CATALOG}
    for alert in alerts:
        for signal in alert.signals:
            if signal.type in counts:
                counts[signal.type] += 1
    return [
        RuleStat(
            id=signal_type.value,
            label=label,
            threshold=template.format(**values),
            active_count=counts[signal_type],
        )
        for signal_type, label, template in RULE_CATALOG
    ]


def build_timeline(alerts: Sequence[Alert], start: datetime, end: datetime) -> list[TimelinePoint]:
    """One point per UTC day from start to end, counting alerts by last_seen_at."""
    points: dict[str, TimelinePoint] = {}
    cursor = ensure_utc(start)
    end = ensure_utc(end)
    while cursor <= end:
        points[day_key(cursor)] = TimelinePoint(day=format_day(cursor))
        cursor += timedelta(days=1)

    for alert in alerts:
        if alert.last_seen_at is None:
            continue
        point = points.get(day_key(alert.last_seen_at))
        if point is not None:
            point.add(alert.severity)
    return list(points.values())


def calc_sla_hours(alerts: Sequence[Alert], reference: datetime) -> float:
    """Mean hours between creation and reference; 0 for an empty list."""
    if not alerts:
        return 0.0
    reference = ensure_utc(reference)
    total = 0.0
    for alert in alerts:
        created_at = alert.created_at or reference
        total += max(0.0, (reference - created_at).total_seconds()) / 3600
    return total / len(alerts)


def _counts(alerts: Sequence[Alert]) -> tuple[list[Alert], int, int]:
    open_alerts = [alert for alert in alerts if alert.status == AlertStatus.OPEN]
    critical = sum(1 for alert in alerts if alert.severity == Severity.CRITICAL)
    investigating = sum(1 for alert in alerts if alert.status in _INVESTIGATING)
    return open_alerts, critical, investigating


def build_baseline_stats(alerts: Sequence[Alert], reference: datetime) -> BaselineStats:
    open_alerts, critical, investigating = _counts(alerts)
    return BaselineStats(
        open_count=len(open_alerts),
        critical_count=critical,
        investigating_count=investigating,
        sla_hours=calc_sla_hours(open_alerts, reference),
    )


def build_pulse_stats(
    alerts: Sequence[Alert],
    prev_alerts: Sequence[Alert],
    range_label: str,
    window_end: datetime,
    prev_window_end: datetime,
) -> PulseStats:
    """Headline counts of the current window with deltas against the previous one.

    The previous-window open count and SLA are taken over all previous
    alerts, not only the open ones, so the open delta compares open alerts
    now against alert volume before.
    """
    open_alerts, critical, investigating = _counts(alerts)
    sla_hours = calc_sla_hours(open_alerts, window_end)

    _, prev_critical, prev_investigating = _counts(prev_alerts)
    prev_open = len(prev_alerts)
    prev_sla = calc_sla_hours(prev_alerts, prev_window_end)

    return PulseStats(
        open_count=len(open_alerts),
        critical_count=critical,
        investigating_count=investigating,
        sla_hours=sla_hours,
        range_label=range_label,
        deltas=PulseDeltas(
            open_pct=pct_change(len(open_alerts), prev_open),
            critical_pct=pct_change(critical, prev_critical),
            investigating_pct=pct_change(investigating, prev_investigating),
            sla_pct=pct_change(sla_hours, prev_sla),
        ),
    )


__all__ = [
    "format_day",
    "format_range",
    "build_rule_stats",
    "build_timeline",
    "calc_sla_hours",
    "build_baseline_stats",
    "build_pulse_stats",
]
