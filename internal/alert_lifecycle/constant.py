"""Constants for the alert lifecycle simulator."""

from internal.model import Severity

# SLA targets in hours per severity
DEFAULT_SLA_HOURS = {
    Severity.CRITICAL: 2.0,
    Severity.HIGH: 6.0,
    Severity.MEDIUM: 12.0,
    Severity.LOW: 24.0,
}

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS

# Shortest age used when spreading synthetic timestamps
MIN_AGE_MS = 30 * MINUTE_MS
MIN_STEP_MS = 5 * MINUTE_MS

# Hash-derived ratios of the age at which each transition happened
ACK_RATIO_BASE = 0.24
ACK_RATIO_STEP = 0.07
ACK_RATIO_MODULO = 6
ACK_RATIO_CAP = 0.82
RESOLVE_RATIO_BASE = 0.58
RESOLVE_RATIO_STEP = 0.08
RESOLVE_RATIO_MODULO = 5
RESOLVE_RATIO_CAP = 0.96
STATUS_SHIFT_RATIO_BASE = 0.12
STATUS_SHIFT_RATIO_STEP = 0.04
STATUS_SHIFT_RATIO_MODULO = 5

ESCALATION_STEP_MS = 45 * MINUTE_MS
SNOOZE_BACKOFF_STEP_MS = 20 * MINUTE_MS
SNOOZE_MIN_HOURS = 2

# Initial status thresholds on hash % 100 and rank percentile
ESCALATE_PCT = 62
BREACHED_ACK_PCT = 58
RESOLVE_PCT = 58
SNOOZE_PCT = 30
ACK_PCT = 48
RANK_RATIO_ACK = 0.35
RANK_RATIO_SNOOZE = 0.55
RANK_RATIO_RESOLVE = 0.75

# Minimum alert count before a status is backfilled
ENSURE_ACK_MIN_ALERTS = 2
ENSURE_ESCALATED_MIN_ALERTS = 4
ENSURE_RESOLVED_MIN_ALERTS = 5
ENSURE_SNOOZED_MIN_ALERTS = 6
