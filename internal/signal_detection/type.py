import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Optional, Sequence

from internal.model import Post, Signal, RuleValue
from .constant import *
from .errors import ErrInvalidThreshold


@dataclass(frozen=True)
class Thresholds:
    """Immutable rule configuration passed into every evaluation."""

    min_volume: int = DEFAULT_MIN_VOLUME
    volume_spike_pct: float = DEFAULT_VOLUME_SPIKE_PCT
    volume_z_score: float = DEFAULT_VOLUME_Z_SCORE
    negativity_pct: float = DEFAULT_NEGATIVITY_PCT
    risk_score: float = DEFAULT_RISK_SCORE
    viral_impact_ratio: float = DEFAULT_VIRAL_IMPACT_RATIO
    viral_delta_pct: float = DEFAULT_VIRAL_DELTA_PCT
    sentiment_shift_pct: float = DEFAULT_SENTIMENT_SHIFT_PCT
    topic_novelty_pct: float = DEFAULT_TOPIC_NOVELTY_PCT
    cross_platform_delta_pct: float = DEFAULT_CROSS_PLATFORM_DELTA_PCT
    cross_platform_min_platforms: int = DEFAULT_CROSS_PLATFORM_MIN_PLATFORMS
    coordination_ratio: float = DEFAULT_COORDINATION_RATIO
    geo_spread_delta_pct: float = DEFAULT_GEO_SPREAD_DELTA_PCT

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite")
        if self.min_volume < 0:
            raise ValueError("min_volume must be >= 0")
        if self.cross_platform_min_platforms < 1:
            raise ValueError("cross_platform_min_platforms must be >= 1")

    def with_overrides(self, overrides: Optional[Mapping[str, Any]]) -> "Thresholds":
        """Return a copy with overrides applied.

        Keys may be snake_case field names or the camelCase wire names.

        Raises:
            ErrInvalidThreshold: unknown key or non-numeric value
        """
        if not overrides:
            return self

        known = {f.name: f.type for f in fields(self)}
        changes: dict[str, Any] = {}
        for raw_key, raw_value in overrides.items():
            key = THRESHOLD_ALIASES.get(raw_key, raw_key)
            if key not in known:
                raise ErrInvalidThreshold(f"unknown threshold: {raw_key}")
            if raw_value is None:
                continue
            try:
                value = float(raw_value)
            except (TypeError, ValueError):
                raise ErrInvalidThreshold(f"threshold {raw_key} must be numeric")
            if not math.isfinite(value):
                raise ErrInvalidThreshold(f"threshold {raw_key} must be finite")
            if key in ("min_volume", "cross_platform_min_platforms"):
                value = int(value)
            changes[key] = value

        try:
            return replace(self, **changes)
        except ValueError as exc:
            raise ErrInvalidThreshold(str(exc)) from exc

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class DetectionContext:
    """Raw posts of the scope, needed by content-level rules."""

    current_posts: Sequence[Post] = ()
    prev_posts: Sequence[Post] = ()
    baseline_daily: Sequence[int] = ()


@dataclass
class DetectionResult:
    signals: list[Signal] = field(default_factory=list)
    rule_values: dict[str, RuleValue] = field(default_factory=dict)
    delta_pct: float = 0.0
    volume_z_score: float = 0.0

    def add(self, signal: Signal, rule_value: RuleValue) -> None:
        self.signals.append(signal)
        self.rule_values[signal.type.value] = rule_value


__all__ = ["Thresholds", "DetectionContext", "DetectionResult"]
