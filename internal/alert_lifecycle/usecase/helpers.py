from datetime import datetime
from typing import Mapping

from internal.model import Alert, AlertStatus, Severity
from internal.alert_identity import utf16_units
from internal.alert_lifecycle.constant import *
from internal.alert_lifecycle.type import LifecycleEntry
from utils.number_utils import round_half_up
from utils.time_utils import from_epoch_ms, to_epoch_ms


def deterministic_hash(value: str) -> int:
    """31-multiplier string hash over UTF-16 code units, as unsigned 32-bit."""
    hash_value = 0
    for unit in utf16_units(value):
        hash_value = (hash_value * 31 + unit) & 0xFFFFFFFF
    return hash_value


def hash_input(alert: Alert, seed: str = "") -> str:
    base = f"{alert.id}:{alert.scope_type}:{alert.scope_id}:{round_half_up(alert.metrics.volume_current)}"
    return f"{seed}:{base}" if seed else base


def resolve_start_ms(alert: Alert, now_ms: int) -> int:
    for candidate in (alert.first_seen_at, alert.created_at, alert.last_seen_at):
        if candidate is not None:
            return to_epoch_ms(candidate)
    return now_ms


def build_entry(
    alert: Alert, now_ms: int, sla_hours: Mapping[Severity, float], seed: str = ""
) -> LifecycleEntry:
    start_ms = resolve_start_ms(alert, now_ms)
    age_hours = max(0.0, (now_ms - start_ms) / HOUR_MS)
    return LifecycleEntry(
        alert=alert,
        age_hours=age_hours,
        hash=deterministic_hash(hash_input(alert, seed)),
        breached=age_hours > sla_hours[alert.severity],
    )


def pick_initial_status(entry: LifecycleEntry, rank_ratio: float) -> AlertStatus:
    severity = entry.alert.severity
    roll = entry.hash % 100
    urgent = severity in (Severity.CRITICAL, Severity.HIGH)

    if entry.breached and urgent:
        return AlertStatus.ESCALATED if roll < ESCALATE_PCT else AlertStatus.ACK
    if entry.breached and rank_ratio > RANK_RATIO_ACK:
        return AlertStatus.ACK if roll < BREACHED_ACK_PCT else AlertStatus.OPEN
    if rank_ratio > RANK_RATIO_RESOLVE and severity != Severity.CRITICAL and roll < RESOLVE_PCT:
        return AlertStatus.RESOLVED
    if rank_ratio > RANK_RATIO_SNOOZE and severity != Severity.CRITICAL and roll < SNOOZE_PCT:
        return AlertStatus.SNOOZED
    if rank_ratio > RANK_RATIO_ACK and roll < ACK_PCT:
        return AlertStatus.ACK
    return AlertStatus.OPEN


def apply_status(entry: LifecycleEntry, status: AlertStatus, now: datetime) -> Alert:
    """Rewrite the lifecycle fields of entry.alert for the given status.

    Timestamps are spread over the alert's age using hash-derived ratios
    and are always clipped to now, so ack <= resolved <= now holds.
    """
    alert = entry.alert
    h = entry.hash
    now_ms = to_epoch_ms(now)
    start_ms = resolve_start_ms(alert, now_ms)
    age_ms = max(MIN_AGE_MS, entry.age_hours * HOUR_MS)

    ack_ratio = min(ACK_RATIO_CAP, ACK_RATIO_BASE + (h % ACK_RATIO_MODULO) * ACK_RATIO_STEP)
    resolve_ratio = min(
        RESOLVE_RATIO_CAP, RESOLVE_RATIO_BASE + (h % RESOLVE_RATIO_MODULO) * RESOLVE_RATIO_STEP
    )
    shift_ratio = STATUS_SHIFT_RATIO_BASE + (h % STATUS_SHIFT_RATIO_MODULO) * STATUS_SHIFT_RATIO_STEP

    ack_ms = min(now_ms, max(start_ms + MIN_STEP_MS, round_half_up(start_ms + age_ms * ack_ratio)))
    resolved_ms = min(
        now_ms, max(ack_ms + MIN_STEP_MS, round_half_up(start_ms + age_ms * resolve_ratio))
    )
    status_shift_ms = min(now_ms, max(start_ms, round_half_up(start_ms + age_ms * shift_ratio)))
    snooze_until_ms = now_ms + ((h % 4) + SNOOZE_MIN_HOURS) * HOUR_MS

    if h % 11 == 0:
        occurrences = 2
    elif h % 23 == 0:
        occurrences = 3
    else:
        occurrences = alert.occurrences or 1
    active_window_count = alert.active_window_count or 1

    if status == AlertStatus.OPEN:
        return alert.evolve(
            status=status,
            last_status_at=from_epoch_ms(status_shift_ms),
            ack_at=None,
            resolved_at=None,
            snooze_until=None,
            occurrences=occurrences,
            active_window_count=max(active_window_count, occurrences),
        )

    if status == AlertStatus.ACK:
        last_status_ms = ack_ms
        snooze_until = None
        resolved_at = None
    elif status == AlertStatus.ESCALATED:
        last_status_ms = min(now_ms, ack_ms + ((h % 3) + 1) * ESCALATION_STEP_MS)
        snooze_until = None
        resolved_at = None
        occurrences = max(occurrences, 2)
        active_window_count = max(active_window_count, 2)
    elif status == AlertStatus.SNOOZED:
        last_status_ms = min(now_ms, max(ack_ms, now_ms - ((h % 4) + 1) * SNOOZE_BACKOFF_STEP_MS))
        snooze_until = from_epoch_ms(snooze_until_ms)
        resolved_at = None
    else:
        last_status_ms = resolved_ms
        snooze_until = None
        resolved_at = from_epoch_ms(resolved_ms)
        occurrences = max(occurrences, 2)
        active_window_count = max(active_window_count, 2)

    return alert.evolve(
        status=status,
        last_status_at=from_epoch_ms(last_status_ms),
        ack_at=from_epoch_ms(ack_ms),
        resolved_at=resolved_at,
        snooze_until=snooze_until,
        occurrences=occurrences,
        active_window_count=active_window_count,
    )


__all__ = [
    "deterministic_hash",
    "hash_input",
    "resolve_start_ms",
    "build_entry",
    "pick_initial_status",
    "apply_status",
]
