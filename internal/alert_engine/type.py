from dataclasses import dataclass, field
from typing import Optional

from internal.model import Alert, Scope, SignalType
from internal.signal_detection import Thresholds
from .constant import DEFAULT_MAX_ALERTS, DEFAULT_MAX_WORKERS


@dataclass(frozen=True)
class Config:
    """Alert engine configuration.

    Attributes:
        thresholds: Base thresholds; per-call overrides are applied on top
        max_alerts: Number of ranked alerts returned
        max_workers: Thread pool size for per-scope evaluation (1 = sequential)
    """

    thresholds: Thresholds = field(default_factory=Thresholds)
    max_alerts: int = DEFAULT_MAX_ALERTS
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        if not isinstance(self.thresholds, Thresholds):
            raise ValueError("thresholds must be an instance of Thresholds")
        if self.max_alerts < 1:
            raise ValueError("max_alerts must be >= 1")
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")


@dataclass(frozen=True)
class ScopeTask:
    """One scope to evaluate: its posts in both windows and its parent."""

    scope: Scope
    current_posts: list
    prev_posts: list
    parent: Optional[Scope] = None


@dataclass(frozen=True)
class ScoredAlert:
    """Alert plus the ranking fields that never leave the engine."""

    alert: Alert
    score: float
    primary_signal: SignalType
    scope: Scope
    parent: Optional[Scope] = None


__all__ = ["Config", "ScopeTask", "ScoredAlert"]
