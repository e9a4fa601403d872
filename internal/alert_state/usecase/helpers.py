import math
from datetime import datetime, timedelta
from typing import Optional

from internal.model import Alert, AlertStatus
from internal.alert_state.constant import ACTION_TARGETS, ALLOWED_TRANSITIONS
from internal.alert_state.errors import ErrInvalidTransition, ErrUnknownAction
from internal.alert_state.type import AlertStateRecord


def _pick(persisted, current):
    return current if persisted is None else persisted


def overlay_record(alert: Alert, record: AlertStateRecord) -> Alert:
    """Persisted values win when set; priority only when finite."""
    priority = alert.priority
    if record.priority is not None and math.isfinite(record.priority):
        priority = int(record.priority)

    merged = alert.evolve(
        status=_pick(record.status, alert.status),
        ack_at=_pick(record.ack_at, alert.ack_at),
        resolved_at=_pick(record.resolved_at, alert.resolved_at),
        snooze_until=_pick(record.snooze_until, alert.snooze_until),
        last_status_at=_pick(record.last_status_at, alert.last_status_at),
        owner=_pick(record.owner, alert.owner),
        team=_pick(record.team, alert.team),
        assignee=_pick(record.assignee, alert.assignee),
        priority=priority,
        severity=_pick(record.severity, alert.severity),
    )
    return normalize_lifecycle(merged)


def normalize_lifecycle(alert: Alert) -> Alert:
    """Clear timestamps that contradict the status.

    A persisted status combined with engine timestamps can otherwise leave
    an open alert with an ack time, or a snooze on a resolved alert.
    """
    if alert.status == AlertStatus.OPEN:
        return alert.evolve(ack_at=None, resolved_at=None, snooze_until=None)

    changes = {}
    if alert.status != AlertStatus.RESOLVED and alert.resolved_at is not None:
        changes["resolved_at"] = None
    if alert.status != AlertStatus.SNOOZED and alert.snooze_until is not None:
        changes["snooze_until"] = None
    resolved_at = changes.get("resolved_at", alert.resolved_at)
    if alert.ack_at and resolved_at and alert.ack_at > resolved_at:
        changes["ack_at"] = resolved_at
    return alert.evolve(**changes) if changes else alert


def resolve_target(action: str) -> AlertStatus:
    key = (action or "").strip().lower()
    if key not in ACTION_TARGETS:
        raise ErrUnknownAction(f"unknown action: {action}")
    return ACTION_TARGETS[key]


def check_transition(current: AlertStatus, target: AlertStatus) -> None:
    if current not in ALLOWED_TRANSITIONS[target]:
        raise ErrInvalidTransition(
            f"cannot move alert from {current.value} to {target.value}"
        )


def build_transition(
    alert_id: str,
    record: Optional[AlertStateRecord],
    target: AlertStatus,
    now: datetime,
    snooze_hours: float,
) -> AlertStateRecord:
    """New record for target, keeping ownership fields of the old record."""
    record = record or AlertStateRecord(alert_id=alert_id)
    ack_at = min(record.ack_at, now) if record.ack_at else now

    if target == AlertStatus.OPEN:
        return AlertStateRecord(
            alert_id=alert_id,
            status=target,
            last_status_at=now,
            owner=record.owner,
            team=record.team,
            assignee=record.assignee,
            priority=record.priority,
            severity=record.severity,
        )

    return AlertStateRecord(
        alert_id=alert_id,
        status=target,
        ack_at=ack_at,
        resolved_at=now if target == AlertStatus.RESOLVED else None,
        snooze_until=(
            now + timedelta(hours=snooze_hours) if target == AlertStatus.SNOOZED else None
        ),
        last_status_at=now,
        owner=record.owner,
        team=record.team,
        assignee=record.assignee,
        priority=record.priority,
        severity=record.severity,
    )


__all__ = [
    "overlay_record",
    "normalize_lifecycle",
    "resolve_target",
    "check_transition",
    "build_transition",
]
