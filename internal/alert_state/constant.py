"""Constants for the persisted alert state overlay."""

from internal.model import AlertStatus

DEFAULT_ACTION = "ack"
DEFAULT_ACTOR = "system"
DEFAULT_SNOOZE_HOURS = 4.0

# Accepted action names and the status each one moves the alert to
ACTION_TARGETS = {
    "open": AlertStatus.OPEN,
    "reopen": AlertStatus.OPEN,
    "ack": AlertStatus.ACK,
    "acknowledge": AlertStatus.ACK,
    "escalate": AlertStatus.ESCALATED,
    "escalated": AlertStatus.ESCALATED,
    "snooze": AlertStatus.SNOOZED,
    "snoozed": AlertStatus.SNOOZED,
    "resolve": AlertStatus.RESOLVED,
    "resolved": AlertStatus.RESOLVED,
}

# Statuses each target may be entered from
ALLOWED_TRANSITIONS = {
    AlertStatus.OPEN: frozenset(AlertStatus),
    AlertStatus.ACK: frozenset(AlertStatus),
    AlertStatus.ESCALATED: frozenset(
        {AlertStatus.OPEN, AlertStatus.ACK, AlertStatus.SNOOZED}
    ),
    AlertStatus.SNOOZED: frozenset(
        {AlertStatus.OPEN, AlertStatus.ACK, AlertStatus.ESCALATED}
    ),
    AlertStatus.RESOLVED: frozenset(
        {AlertStatus.OPEN, AlertStatus.ACK, AlertStatus.ESCALATED, AlertStatus.SNOOZED}
    ),
}
