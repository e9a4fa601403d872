"""Alert scoring use case.

Turns the fired signals of a scope into:
- a 0-100 composite score and its severity tier
- the primary signal (highest per-signal severity, detection order on ties)
- a 0-100 confidence estimate and a 0-100 priority
- the internal ranking score used for ordering and deduplication
"""

from typing import Sequence

from internal.model import Severity, Signal
from internal.alert_scoring.constant import *
from internal.alert_scoring.type import ScoreCard
from internal.signal_detection import DetectionResult
from internal.window_stats import WindowStats
from utils.number_utils import clamp, round_half_up


def calc_composite_score(
    stats: WindowStats, delta_pct: float, impact_ratio: float, z_score: float
) -> float:
    volume_term = min(TERM_CAP, abs(delta_pct))
    risk_term = min(TERM_CAP, stats.risk_score)
    negativity_term = min(TERM_CAP, stats.negative_share)
    impact_term = clamp((impact_ratio - 1) * 100, 0.0, TERM_CAP)
    z_term = clamp(z_score * Z_SCORE_SCALE, 0.0, TERM_CAP)
    return (
        volume_term * WEIGHT_VOLUME
        + risk_term * WEIGHT_RISK
        + negativity_term * WEIGHT_NEGATIVITY
        + impact_term * WEIGHT_IMPACT
        + z_term * WEIGHT_Z_SCORE
    )


def resolve_composite_severity(score: float) -> Severity:
    for cutoff, severity in COMPOSITE_SEVERITY_TIERS:
        if score >= cutoff:
            return severity
    return Severity.LOW


def _tier(value: float, cutoffs: tuple) -> Severity:
    critical, high, medium = cutoffs
    if value >= critical:
        return Severity.CRITICAL
    if value >= high:
        return Severity.HIGH
    if value >= medium:
        return Severity.MEDIUM
    return Severity.LOW


def resolve_signal_severity(signal: Signal, impact_ratio: float) -> Severity:
    cutoffs = SIGNAL_SEVERITY_TIERS.get(signal.type)
    if cutoffs is None:
        return _tier(impact_ratio, IMPACT_RATIO_SEVERITY_TIERS)
    return _tier(signal.value, cutoffs)


def pick_primary_signal(signals: Sequence[Signal], impact_ratio: float) -> Signal:
    if not signals:
        raise ValueError("pick_primary_signal requires at least one signal")
    # sorted() is stable, so ties keep detection order
    return sorted(
        signals,
        key=lambda signal: -resolve_signal_severity(signal, impact_ratio).weight,
    )[0]


def calc_confidence(
    stats: WindowStats, prev_stats: WindowStats, signal_count: int, min_volume: int
) -> int:
    volume_score = min(1.0, stats.total / max(1, min_volume * 2))
    signal_score = min(1.0, signal_count / CONFIDENCE_SIGNAL_SATURATION)
    stability_score = 0.0
    if stats.total:
        delta = abs(stats.total - prev_stats.total)
        stability_score = 1 - min(1.0, delta / max(stats.total, prev_stats.total, 1))
    raw = (
        volume_score * CONFIDENCE_WEIGHT_VOLUME
        + signal_score * CONFIDENCE_WEIGHT_SIGNALS
        + stability_score * CONFIDENCE_WEIGHT_STABILITY
    )
    return round_half_up(raw * 100)


def calc_priority(severity: Severity, risk_score: float) -> int:
    base = severity.weight * PRIORITY_SEVERITY_FACTOR
    risk_boost = min(PRIORITY_RISK_CAP, risk_score * PRIORITY_RISK_FACTOR)
    return round_half_up(min(PRIORITY_CAP, base + risk_boost))


def calc_ranking_score(composite_score: float, signal_count: int) -> float:
    return composite_score + min(RANKING_SIGNAL_BONUS_CAP, signal_count * RANKING_SIGNAL_BONUS)


def score_alert(
    stats: WindowStats,
    prev_stats: WindowStats,
    detection: DetectionResult,
    impact_ratio: float,
    min_volume: int,
) -> ScoreCard:
    """Classify a scope that fired at least one signal."""
    composite = calc_composite_score(
        stats, detection.delta_pct, impact_ratio, detection.volume_z_score
    )
    severity = resolve_composite_severity(composite)
    signal_count = len(detection.signals)
    return ScoreCard(
        composite_score=composite,
        severity=severity,
        primary_signal=pick_primary_signal(detection.signals, impact_ratio),
        confidence=calc_confidence(stats, prev_stats, signal_count, min_volume),
        priority=calc_priority(severity, stats.risk_score),
        ranking_score=calc_ranking_score(composite, signal_count),
    )


__all__ = [
    "calc_composite_score",
    "resolve_composite_severity",
    "resolve_signal_severity",
    "pick_primary_signal",
    "calc_confidence",
    "calc_priority",
    "calc_ranking_score",
    "score_alert",
]
