"""Alert types shared by the engine, the state overlay and the report layer."""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from utils.time_utils import to_iso
from .constant import SEVERITY_WEIGHTS
from .post import Post


class SignalType(str, Enum):
    VOLUME = "volume"
    SENTIMENT_SHIFT = "sentiment_shift"
    NEGATIVITY = "negativity"
    RISK = "risk"
    VIRAL = "viral"
    TOPIC_NOVELTY = "topic_novelty"
    CROSS_PLATFORM = "cross_platform"
    COORDINATION = "coordination"
    GEO_EXPANSION = "geo_expansion"


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return SEVERITY_WEIGHTS[self.value]


class AlertStatus(str, Enum):
    OPEN = "open"
    ACK = "ack"
    ESCALATED = "escalated"
    SNOOZED = "snoozed"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class NamedCount:
    name: str
    count: int


@dataclass(frozen=True)
class KeywordCount:
    term: str
    count: int


@dataclass(frozen=True)
class Signal:
    type: SignalType
    label: str
    value: float
    delta_pct: Optional[float] = None


@dataclass(frozen=True)
class RuleValue:
    """Raw value and threshold of a fired rule, kept for explainability."""

    value: float
    threshold: float
    delta_pct: Optional[float] = None
    z_score: Optional[float] = None
    z_threshold: Optional[float] = None
    min_volume: Optional[int] = None
    delta_threshold: Optional[float] = None


@dataclass(frozen=True)
class AlertMetrics:
    volume_current: int = 0
    volume_prev: int = 0
    volume_delta_pct: float = 0.0
    negative_share: float = 0.0
    risk_score: float = 0.0
    reach: int = 0
    engagement: int = 0
    engagement_rate: float = 0.0
    impact_score: float = 0.0
    impact_ratio: float = 0.0


@dataclass(frozen=True)
class Alert:
    # Identity
    id: str
    stable_id: str
    instance_id: str

    # Description
    title: str
    summary: str
    scope_type: str
    scope_id: str
    scope_label: str

    # Classification
    severity: Severity
    status: AlertStatus
    priority: int
    confidence: int

    metrics: AlertMetrics
    signals: list[Signal] = field(default_factory=list)
    rule_ids: list[str] = field(default_factory=list)
    rule_values: dict[str, RuleValue] = field(default_factory=dict)

    # Context
    top_topics: list[NamedCount] = field(default_factory=list)
    top_entities: list[NamedCount] = field(default_factory=list)
    keywords: list[KeywordCount] = field(default_factory=list)
    unique_authors: int = 0
    new_authors_pct: float = 0.0
    geo_spread: int = 0
    evidence: list[Post] = field(default_factory=list)

    # Lifecycle
    created_at: Optional[datetime] = None
    first_seen_at: Optional[datetime] = None
    last_seen_at: Optional[datetime] = None
    last_status_at: Optional[datetime] = None
    ack_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
    snooze_until: Optional[datetime] = None
    occurrences: int = 1
    active_window_count: int = 1

    # Workflow ownership, only ever set by the persisted-state overlay
    owner: Optional[str] = None
    team: Optional[str] = None
    assignee: Optional[str] = None

    def evolve(self, **changes: Any) -> "Alert":
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: serialize(getattr(self, f.name)) for f in fields(self)}


def serialize(value: Any) -> Any:
    """JSON-ready rendering of engine values (enums, datetimes, dataclasses)."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return to_iso(value)
    if isinstance(value, (Post, Alert)):
        return value.to_dict()
    if hasattr(value, "__dataclass_fields__"):
        return {
            f.name: serialize(getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, dict):
        return {str(k): serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return value


__all__ = [
    "SignalType",
    "Severity",
    "AlertStatus",
    "NamedCount",
    "KeywordCount",
    "Signal",
    "RuleValue",
    "AlertMetrics",
    "Alert",
    "serialize",
]
