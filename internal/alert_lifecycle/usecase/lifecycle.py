"""Lifecycle simulation use case.

Alerts are evaluated statelessly, so until an operator acts on them their
workflow status is derived from the alert itself:
- a deterministic hash of id, scope and volume picks the initial status
  together with the SLA breach flag and the alert's rank percentile
- statuses missing from a non-trivial list are backfilled so the board
  always shows every column
- timestamps are spread over the alert's age and clipped to now

The same inputs always produce the same statuses.
"""

from collections import Counter
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Sequence

from pkg.logger.logger import Logger
from internal.model import Alert, AlertStatus, Severity
from internal.alert_lifecycle.constant import (
    ENSURE_ACK_MIN_ALERTS,
    ENSURE_ESCALATED_MIN_ALERTS,
    ENSURE_RESOLVED_MIN_ALERTS,
    ENSURE_SNOOZED_MIN_ALERTS,
)
from internal.alert_lifecycle.interface import ILifecycleSimulator
from internal.alert_lifecycle.type import Config, LifecycleEntry
from utils.time_utils import ensure_utc, to_epoch_ms
from .helpers import apply_status, build_entry, pick_initial_status

_URGENT = (Severity.CRITICAL, Severity.HIGH)

Picker = Callable[[list[LifecycleEntry]], int]


def _first(entries: list[LifecycleEntry], predicate) -> int:
    for index, entry in enumerate(entries):
        if predicate(entry):
            return index
    return -1


def _pick_ack(entries: list[LifecycleEntry]) -> int:
    return _first(entries, lambda e: e.alert.status == AlertStatus.OPEN)


def _pick_escalated(entries: list[LifecycleEntry]) -> int:
    index = _first(
        entries,
        lambda e: e.alert.severity in _URGENT and e.alert.status != AlertStatus.RESOLVED,
    )
    if index >= 0:
        return index
    index = _first(entries, lambda e: e.breached and e.alert.status != AlertStatus.RESOLVED)
    if index >= 0:
        return index
    return _pick_ack(entries)


def _pick_resolved(entries: list[LifecycleEntry]) -> int:
    for index in range(len(entries) - 1, -1, -1):
        alert = entries[index].alert
        if alert.severity != Severity.CRITICAL and alert.status not in (
            AlertStatus.ESCALATED,
            AlertStatus.RESOLVED,
        ):
            return index
    return -1


def _pick_snoozed(entries: list[LifecycleEntry]) -> int:
    return _first(
        entries,
        lambda e: e.alert.severity in (Severity.MEDIUM, Severity.LOW)
        and e.alert.status == AlertStatus.OPEN,
    )


# Backfill order matters: later pickers see earlier backfills.
_ENSURE_RULES: tuple[tuple[AlertStatus, int, Picker], ...] = (
    (AlertStatus.ACK, ENSURE_ACK_MIN_ALERTS, _pick_ack),
    (AlertStatus.ESCALATED, ENSURE_ESCALATED_MIN_ALERTS, _pick_escalated),
    (AlertStatus.RESOLVED, ENSURE_RESOLVED_MIN_ALERTS, _pick_resolved),
    (AlertStatus.SNOOZED, ENSURE_SNOOZED_MIN_ALERTS, _pick_snoozed),
)


class HashLifecycleSimulator(ILifecycleSimulator):
    def __init__(self, config: Optional[Config] = None, logger: Optional[Logger] = None):
        self.config = config or Config()
        self.logger = logger

    def simulate(self, alerts: Sequence[Alert], now: datetime) -> list[Alert]:
        if not alerts:
            return []

        now = ensure_utc(now)
        now_ms = to_epoch_ms(now)
        total = len(alerts)

        entries: list[LifecycleEntry] = []
        for index, alert in enumerate(alerts):
            entry = build_entry(alert, now_ms, self.config.sla_hours, self.config.seed)
            rank_ratio = (index + 1) / max(1, total)
            status = pick_initial_status(entry, rank_ratio)
            entries.append(replace(entry, alert=apply_status(entry, status, now)))

        for status, min_alerts, picker in _ENSURE_RULES:
            if total < min_alerts:
                continue
            if any(entry.alert.status == status for entry in entries):
                continue
            index = picker(entries)
            if index < 0:
                continue
            entry = entries[index]
            entries[index] = replace(entry, alert=apply_status(entry, status, now))

        result = [entry.alert for entry in entries]

        if self.logger:
            counts = Counter(alert.status.value for alert in result)
            self.logger.debug(
                "internal.alert_lifecycle.usecase.simulate: Lifecycle applied",
                extra={
                    "alerts": total,
                    "breached": sum(1 for entry in entries if entry.breached),
                    "statuses": dict(counts),
                },
            )
        return result


class StaticLifecycleSimulator(ILifecycleSimulator):
    """Leaves every alert open with last_status_at at its creation time."""

    def simulate(self, alerts: Sequence[Alert], now: datetime) -> list[Alert]:
        return [
            alert.evolve(
                status=AlertStatus.OPEN,
                last_status_at=alert.created_at or ensure_utc(now),
                ack_at=None,
                resolved_at=None,
                snooze_until=None,
            )
            for alert in alerts
        ]


__all__ = ["HashLifecycleSimulator", "StaticLifecycleSimulator"]
