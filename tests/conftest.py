"""Shared fixtures: post and alert factories with a fixed UTC clock."""

import itertools
from datetime import datetime, timedelta, timezone

import pytest  # type: ignore

from internal.model import (
    Alert,
    AlertMetrics,
    AlertStatus,
    Location,
    Post,
    Severity,
    Signal,
    SignalType,
)

BASE_TS = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def base_ts() -> datetime:
    """Timestamp every factory post defaults to."""
    return BASE_TS


@pytest.fixture
def make_post():
    """Build a Post with sensible defaults; `city` sets the location."""
    counter = itertools.count(1)

    def _make(**overrides) -> Post:
        index = next(counter)
        data = dict(
            id=f"p{index}",
            timestamp=BASE_TS,
            author=f"Autor {index}",
            handle=f"@autor{index}",
            platform="twitter",
            content=f"mensaje numero {index}",
            sentiment="neutral",
            reach=100,
            engagement=10,
        )
        city = overrides.pop("city", None)
        if city is not None:
            data["location"] = Location(city=city)
        data.update(overrides)
        return Post(**data)

    return _make


@pytest.fixture
def make_posts(make_post):
    """Build `count` posts sharing the same overrides."""

    def _make(count: int, **overrides) -> list[Post]:
        return [make_post(**overrides) for _ in range(count)]

    return _make


@pytest.fixture
def make_alert():
    """Build an open engine Alert for a scope."""

    def _make(
        alert_id: str = "cluster:Salud",
        severity: Severity = Severity.MEDIUM,
        status: AlertStatus = AlertStatus.OPEN,
        created_at: datetime = BASE_TS - timedelta(hours=1),
        volume: int = 50,
        signals=None,
        **overrides,
    ) -> Alert:
        if alert_id == "overall":
            scope_type, scope_id = "overall", "overall"
        else:
            scope_type, scope_id = alert_id.split(":", 1)
        data = dict(
            id=alert_id,
            stable_id=f"al_{scope_id.lower()}",
            instance_id=f"ai_{scope_id.lower()}",
            title=f"{scope_id} · Negatividad alta",
            summary="Vol 50 · Δ +10 · Neg 40% · Riesgo 50",
            scope_type=scope_type,
            scope_id=scope_id,
            scope_label=scope_id,
            severity=severity,
            status=status,
            priority=severity.weight * 20,
            confidence=60,
            metrics=AlertMetrics(volume_current=volume, risk_score=50.0),
            signals=signals
            if signals is not None
            else [Signal(SignalType.NEGATIVITY, "Negatividad alta", 40.0)],
            created_at=created_at,
            first_seen_at=created_at,
            last_seen_at=created_at,
            last_status_at=created_at,
        )
        data.update(overrides)
        return Alert(**data)

    return _make
