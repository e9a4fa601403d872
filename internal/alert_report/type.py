from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from internal.model import Alert, AlertMetrics, AlertStatus, Post, Severity, Signal, serialize
from internal.signal_detection import Thresholds
from utils.time_utils import parse_timestamp
from .constant import (
    DEFAULT_MAX_RELATED,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_TIMEFRAME,
    MAX_PAGE_LIMIT,
    SORT_SCORE,
    TIMEFRAME_HOURS,
)
from .errors import ErrInvalidQuery


@dataclass(frozen=True)
class Config:
    """Alert report configuration.

    Attributes:
        thresholds: Thresholds shown in the rule catalog
        default_timeframe: Timeframe used when a query does not set one
        max_related: Cap on related alerts in the detail view
        page_limit: Default page size of the dashboard alert list
    """

    thresholds: Thresholds = field(default_factory=Thresholds)
    default_timeframe: str = DEFAULT_TIMEFRAME
    max_related: int = DEFAULT_MAX_RELATED
    page_limit: int = DEFAULT_PAGE_LIMIT

    def __post_init__(self):
        if self.default_timeframe not in TIMEFRAME_HOURS:
            raise ValueError(f"default_timeframe must be one of {list(TIMEFRAME_HOURS)}")
        if self.max_related < 0:
            raise ValueError("max_related must be >= 0")
        if not 1 <= self.page_limit <= MAX_PAGE_LIMIT:
            raise ValueError(f"page_limit must be between 1 and {MAX_PAGE_LIMIT}")


def parse_list(value: Any) -> list[str]:
    """Comma-separated string or list into trimmed non-empty entries."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(entry).strip() for entry in value if str(entry).strip()]


def _parse_int(value: Any) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def parse_limit(value: Any, default: int = DEFAULT_PAGE_LIMIT) -> int:
    parsed = _parse_int(value) if value is not None else None
    if parsed is None or parsed <= 0:
        return default
    return min(parsed, MAX_PAGE_LIMIT)


def parse_cursor(value: Any) -> int:
    parsed = _parse_int(value) if value not in (None, "") else None
    return parsed if parsed is not None and parsed >= 0 else 0


@dataclass(frozen=True)
class Query:
    """Dashboard filters, window selection, sorting and paging."""

    sentiment: Optional[str] = None
    platform: Optional[str] = None
    cluster: Optional[str] = None
    subcluster: Optional[str] = None
    search: str = ""
    timeframe: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    severity: tuple[str, ...] = ()
    status: tuple[str, ...] = ()
    sort: str = SORT_SCORE
    cursor: int = 0
    limit: Optional[int] = None

    def __post_init__(self):
        if self.timeframe is not None and self.timeframe not in TIMEFRAME_HOURS:
            raise ErrInvalidQuery(f"unknown timeframe: {self.timeframe}")
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ErrInvalidQuery("date_from must not be after date_to")
        if self.cursor < 0:
            raise ErrInvalidQuery("cursor must be >= 0")

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> "Query":
        """Build a query from request-style parameters (camelCase or snake_case).

        Raises:
            ErrInvalidQuery: unparseable dates or unknown timeframe
        """
        raw = raw or {}

        def pick(*keys: str) -> Any:
            for key in keys:
                if raw.get(key) not in (None, ""):
                    return raw[key]
            return None

        def date(*keys: str) -> Optional[datetime]:
            value = pick(*keys)
            if value is None:
                return None
            parsed = parse_timestamp(value)
            if parsed is None:
                raise ErrInvalidQuery(f"invalid date: {value}")
            return parsed

        limit = pick("limit")
        return cls(
            sentiment=pick("sentiment"),
            platform=pick("platform"),
            cluster=pick("cluster"),
            subcluster=pick("subcluster"),
            search=str(pick("search") or ""),
            timeframe=pick("timeframe"),
            date_from=date("dateFrom", "date_from"),
            date_to=date("dateTo", "date_to"),
            severity=tuple(parse_list(pick("severity"))),
            status=tuple(parse_list(pick("status"))),
            sort=str(pick("sort") or SORT_SCORE),
            cursor=parse_cursor(pick("cursor")),
            limit=parse_limit(limit) if limit is not None else None,
        )


@dataclass(frozen=True)
class Window:
    """Current, previous and pre-previous post windows of equal length."""

    current_posts: list[Post]
    prev_posts: list[Post]
    prev_prev_posts: list[Post]
    start: datetime
    end: datetime
    prev_start: datetime
    prev_end: datetime
    baseline_start: datetime
    baseline_end: datetime


@dataclass(frozen=True)
class RuleStat:
    id: str
    label: str
    threshold: str
    active_count: int = 0


@dataclass
class TimelinePoint:
    day: str
    total: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0

    def add(self, severity: Severity) -> None:
        self.total += 1
        setattr(self, severity.value, getattr(self, severity.value) + 1)


@dataclass(frozen=True)
class PulseDeltas:
    open_pct: float = 0.0
    critical_pct: float = 0.0
    investigating_pct: float = 0.0
    sla_pct: float = 0.0


@dataclass(frozen=True)
class BaselineStats:
    open_count: int = 0
    critical_count: int = 0
    investigating_count: int = 0
    sla_hours: float = 0.0


@dataclass(frozen=True)
class PulseStats:
    open_count: int = 0
    critical_count: int = 0
    investigating_count: int = 0
    sla_hours: float = 0.0
    range_label: str = ""
    deltas: PulseDeltas = field(default_factory=PulseDeltas)


@dataclass(frozen=True)
class HistoryEntry:
    """Snapshot of one alert in one evaluation window."""

    window_start: datetime
    window_end: datetime
    severity: Severity
    status: AlertStatus
    metrics: AlertMetrics
    signals: list[Signal] = field(default_factory=list)


def _window_bounds(window: Window) -> dict[str, Any]:
    return {
        "window": serialize({"start": window.start, "end": window.end}),
        "prev_window": serialize({"start": window.prev_start, "end": window.prev_end}),
        "baseline": serialize({"start": window.baseline_start, "end": window.baseline_end}),
    }


@dataclass(frozen=True)
class DashboardSnapshot:
    alerts: list[Alert]
    total: int
    next_cursor: Optional[str]
    pulse_stats: PulseStats
    baseline_stats: BaselineStats
    timeline: list[TimelinePoint]
    rules: list[RuleStat]
    window: Window

    def to_dict(self) -> dict[str, Any]:
        return {
            "alerts": [alert.to_dict() for alert in self.alerts],
            "total": self.total,
            "next_cursor": self.next_cursor,
            "pulse_stats": serialize(self.pulse_stats),
            "baseline_stats": serialize(self.baseline_stats),
            "timeline": serialize(self.timeline),
            "rules": serialize(self.rules),
            **_window_bounds(self.window),
        }


@dataclass(frozen=True)
class AlertDetail:
    alert: Alert
    history: list[HistoryEntry]
    related_alerts: list[Alert]
    pulse_stats: PulseStats
    baseline_stats: BaselineStats
    timeline: list[TimelinePoint]
    rules: list[RuleStat]
    window: Window

    def to_dict(self) -> dict[str, Any]:
        return {
            "alert": self.alert.to_dict(),
            "history": serialize(self.history),
            "related_alerts": [alert.to_dict() for alert in self.related_alerts],
            "pulse_stats": serialize(self.pulse_stats),
            "baseline_stats": serialize(self.baseline_stats),
            "timeline": serialize(self.timeline),
            "rules": serialize(self.rules),
            **_window_bounds(self.window),
        }


__all__ = [
    "Config",
    "Query",
    "Window",
    "RuleStat",
    "TimelinePoint",
    "PulseDeltas",
    "PulseStats",
    "BaselineStats",
    "HistoryEntry",
    "DashboardSnapshot",
    "AlertDetail",
    "parse_list",
    "parse_limit",
    "parse_cursor",
]
