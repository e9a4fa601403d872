"""Unit tests for the alert lifecycle simulator.

Tests cover:
- Deterministic hash and seeded hash input
- Initial status selection by breach, rank and hash roll
- Timestamp invariants (open has no lifecycle stamps, ack <= resolved <= now)
- Status backfill for longer alert lists
- Static simulator and factory
"""

from datetime import timedelta

import pytest  # type: ignore

from internal.model import AlertStatus, Severity
from internal.alert_lifecycle import (
    Config,
    HashLifecycleSimulator,
    LifecycleEntry,
    New,
    StaticLifecycleSimulator,
    apply_status,
    build_entry,
    deterministic_hash,
    pick_initial_status,
    DEFAULT_SLA_HOURS,
)
from internal.alert_lifecycle.usecase.helpers import hash_input
from utils.time_utils import to_epoch_ms


def _statuses(alerts):
    return [alert.status for alert in alerts]


def _entry(alert, hash_value, breached=False, age_hours=1.0):
    return LifecycleEntry(alert=alert, age_hours=age_hours, hash=hash_value, breached=breached)


def _assert_invariants(alerts, now):
    for alert in alerts:
        if alert.status == AlertStatus.OPEN:
            assert alert.ack_at is None
            assert alert.resolved_at is None
            assert alert.snooze_until is None
        else:
            assert alert.ack_at is not None
            assert alert.ack_at <= now
        if alert.status == AlertStatus.RESOLVED:
            assert alert.ack_at <= alert.resolved_at <= now
            assert alert.occurrences >= 2
        else:
            assert alert.resolved_at is None
        if alert.status == AlertStatus.SNOOZED:
            assert alert.snooze_until > now
        else:
            assert alert.snooze_until is None
        if alert.status == AlertStatus.ESCALATED:
            assert alert.occurrences >= 2
        assert alert.last_status_at <= now
        assert alert.active_window_count >= 1


# ============================================================================
# Hashing
# ============================================================================


class TestDeterministicHash:
    def test_known_values(self):
        assert deterministic_hash("") == 0
        assert deterministic_hash("a") == 97
        assert deterministic_hash("ab") == 97 * 31 + 98

    def test_unsigned_32_bit(self):
        value = deterministic_hash("x" * 200)
        assert 0 <= value <= 0xFFFFFFFF

    def test_hash_input(self, make_alert):
        alert = make_alert("city:Lima", volume=42)
        assert hash_input(alert) == "city:Lima:city:Lima:42"
        assert hash_input(alert, "s1") == "s1:city:Lima:city:Lima:42"

    def test_build_entry_breach(self, make_alert, base_ts):
        alert = make_alert(severity=Severity.CRITICAL, created_at=base_ts - timedelta(hours=3))
        entry = build_entry(alert, to_epoch_ms(base_ts), DEFAULT_SLA_HOURS)
        assert entry.age_hours == pytest.approx(3.0)
        assert entry.breached is True


# ============================================================================
# Initial status
# ============================================================================


class TestInitialStatus:
    @pytest.mark.parametrize(
        "severity,breached,rank,hash_value,expected",
        [
            (Severity.CRITICAL, True, 0.1, 10, AlertStatus.ESCALATED),
            (Severity.HIGH, True, 0.1, 70, AlertStatus.ACK),
            (Severity.LOW, True, 0.5, 10, AlertStatus.ACK),
            (Severity.LOW, True, 0.5, 60, AlertStatus.OPEN),
            (Severity.MEDIUM, False, 0.9, 10, AlertStatus.RESOLVED),
            (Severity.MEDIUM, False, 0.6, 10, AlertStatus.SNOOZED),
            (Severity.MEDIUM, False, 0.6, 40, AlertStatus.ACK),
            (Severity.MEDIUM, False, 0.6, 50, AlertStatus.OPEN),
            (Severity.MEDIUM, False, 0.2, 10, AlertStatus.OPEN),
            (Severity.CRITICAL, False, 0.9, 10, AlertStatus.ACK),
        ],
    )
    def test_pick(self, make_alert, severity, breached, rank, hash_value, expected):
        entry = _entry(make_alert(severity=severity), hash_value, breached=breached)
        assert pick_initial_status(entry, rank) == expected


class TestApplyStatus:
    def test_ack_time_spread_over_age(self, make_alert, base_ts):
        created = base_ts - timedelta(hours=10)
        entry = _entry(make_alert(created_at=created), 0, age_hours=10.0)
        alert = apply_status(entry, AlertStatus.ACK, base_ts)
        assert alert.ack_at == created + timedelta(hours=2.4)
        assert alert.last_status_at == alert.ack_at
        assert alert.resolved_at is None

    def test_open_clears_stamps(self, make_alert, base_ts):
        alert = make_alert(ack_at=base_ts, snooze_until=base_ts + timedelta(hours=1))
        opened = apply_status(_entry(alert, 5), AlertStatus.OPEN, base_ts)
        assert opened.ack_at is None
        assert opened.snooze_until is None

    def test_resolved(self, make_alert, base_ts):
        entry = _entry(make_alert(created_at=base_ts - timedelta(hours=4)), 7, age_hours=4.0)
        alert = apply_status(entry, AlertStatus.RESOLVED, base_ts)
        assert alert.ack_at <= alert.resolved_at <= base_ts
        assert alert.occurrences >= 2
        assert alert.active_window_count >= 2

    def test_snoozed(self, make_alert, base_ts):
        alert = apply_status(_entry(make_alert(), 3), AlertStatus.SNOOZED, base_ts)
        assert alert.snooze_until == base_ts + timedelta(hours=5)

    def test_young_alert_is_clipped_to_now(self, make_alert, base_ts):
        alert = make_alert(created_at=base_ts - timedelta(minutes=2))
        resolved = apply_status(_entry(alert, 1, age_hours=2 / 60), AlertStatus.RESOLVED, base_ts)
        assert resolved.resolved_at == base_ts
        assert resolved.ack_at <= base_ts


# ============================================================================
# Simulation
# ============================================================================


class TestHashLifecycleSimulator:
    @pytest.fixture
    def simulator(self):
        return HashLifecycleSimulator()

    def test_empty(self, simulator, base_ts):
        assert simulator.simulate([], base_ts) == []

    def test_invariants_on_mixed_batch(self, simulator, make_alert, base_ts):
        alerts = [
            make_alert(
                f"city:c{index}",
                severity=list(Severity)[index % 4],
                created_at=base_ts - timedelta(hours=index * 3),
                volume=40 + index,
            )
            for index in range(12)
        ]
        result = simulator.simulate(alerts, base_ts)
        assert [alert.id for alert in result] == [alert.id for alert in alerts]
        _assert_invariants(result, base_ts)

    def test_deterministic(self, simulator, make_alert, base_ts):
        alerts = [make_alert(f"city:c{index}", volume=index) for index in range(8)]
        first = [alert.to_dict() for alert in simulator.simulate(alerts, base_ts)]
        second = [alert.to_dict() for alert in simulator.simulate(alerts, base_ts)]
        assert first == second

    def test_breached_urgent_alert(self, simulator, make_alert, base_ts):
        alert = make_alert(severity=Severity.CRITICAL, created_at=base_ts - timedelta(hours=10))
        (result,) = simulator.simulate([alert], base_ts)
        assert result.status in (AlertStatus.ESCALATED, AlertStatus.ACK)

    def test_backfill_escalated_for_critical_batch(self, simulator, make_alert, base_ts):
        alerts = [
            make_alert(f"cluster:k{index}", severity=Severity.CRITICAL) for index in range(4)
        ]
        statuses = _statuses(simulator.simulate(alerts, base_ts))
        assert AlertStatus.ESCALATED in statuses
        assert AlertStatus.RESOLVED not in statuses
        assert AlertStatus.SNOOZED not in statuses

    def test_backfill_on_medium_batch(self, simulator, make_alert, base_ts):
        alerts = [make_alert(f"city:m{index}", severity=Severity.MEDIUM) for index in range(6)]
        result = simulator.simulate(alerts, base_ts)
        statuses = _statuses(result)
        assert AlertStatus.ACK in statuses
        assert AlertStatus.ESCALATED in statuses
        assert AlertStatus.RESOLVED in statuses
        _assert_invariants(result, base_ts)

    def test_seed_changes_hash(self, make_alert, base_ts):
        alert = make_alert()
        now_ms = to_epoch_ms(base_ts)
        plain = build_entry(alert, now_ms, DEFAULT_SLA_HOURS)
        seeded = build_entry(alert, now_ms, DEFAULT_SLA_HOURS, seed="tenant-a")
        assert plain.hash == deterministic_hash(hash_input(alert))
        assert seeded.hash == deterministic_hash("tenant-a:" + hash_input(alert))


class TestStaticSimulator:
    def test_all_open(self, make_alert, base_ts):
        alert = make_alert(status=AlertStatus.ACK, ack_at=base_ts)
        (result,) = StaticLifecycleSimulator().simulate([alert], base_ts)
        assert result.status == AlertStatus.OPEN
        assert result.ack_at is None
        assert result.last_status_at == alert.created_at


class TestFactory:
    def test_new_default(self):
        assert isinstance(New(), HashLifecycleSimulator)

    def test_new_disabled(self):
        assert isinstance(New(Config(enabled=False)), StaticLifecycleSimulator)

    def test_invalid_config_type(self):
        with pytest.raises(ValueError):
            New("config")

    def test_missing_severity(self):
        with pytest.raises(ValueError, match="missing"):
            Config(sla_hours={Severity.CRITICAL: 2})

    def test_non_positive_sla(self):
        sla = dict(DEFAULT_SLA_HOURS)
        sla[Severity.LOW] = 0
        with pytest.raises(ValueError):
            Config(sla_hours=sla)
