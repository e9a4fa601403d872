"""Signal detection use case.

Compares the current WindowStats of a scope against the previous window
and fires up to nine independent rules:
- volume, sentiment_shift, negativity, risk, viral, topic_novelty
- cross_platform and coordination (need the raw posts of the scope)
- geo_expansion

Every rule is gated on stats.total >= thresholds.min_volume, where the
caller has already resolved min_volume to the scope's dynamic floor.
"""

from typing import Optional

from pkg.logger.logger import Logger
from internal.signal_detection.interface import ISignalDetection
from internal.signal_detection.type import Thresholds, DetectionContext, DetectionResult
from internal.window_stats import WindowStats
from utils.number_utils import pct_change
from .helpers import (
    volume_z_score,
    detect_volume,
    detect_sentiment_shift,
    detect_negativity,
    detect_risk,
    detect_viral,
    detect_topic_novelty,
    detect_cross_platform,
    detect_coordination,
    detect_geo_expansion,
)


def detect_signals(
    stats: WindowStats,
    prev_stats: WindowStats,
    impact_ratio: float,
    thresholds: Thresholds,
    context: Optional[DetectionContext] = None,
) -> DetectionResult:
    """Run all rules in their fixed order. Pure; never raises on data."""
    context = context or DetectionContext()
    result = DetectionResult(
        delta_pct=pct_change(stats.total, prev_stats.total),
        volume_z_score=volume_z_score(stats.total, context.baseline_daily),
    )

    if stats.total < thresholds.min_volume:
        return result

    candidates = [
        detect_volume(stats, result.delta_pct, result.volume_z_score, thresholds),
        detect_sentiment_shift(stats, prev_stats, thresholds),
        detect_negativity(stats, thresholds),
        detect_risk(stats, thresholds),
        detect_viral(impact_ratio, result.delta_pct, thresholds),
        detect_topic_novelty(stats, prev_stats, thresholds),
    ]
    if context.current_posts:
        candidates.append(detect_cross_platform(context, thresholds))
        candidates.append(detect_coordination(stats, context, thresholds))
    candidates.append(detect_geo_expansion(stats, prev_stats, thresholds))

    for fired in candidates:
        if fired is not None:
            result.add(*fired)
    return result


class SignalDetection(ISignalDetection):
    """Logging wrapper around detect_signals."""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger

    def detect(
        self,
        stats: WindowStats,
        prev_stats: WindowStats,
        impact_ratio: float,
        thresholds: Thresholds,
        context: Optional[DetectionContext] = None,
    ) -> DetectionResult:
        result = detect_signals(stats, prev_stats, impact_ratio, thresholds, context)

        if self.logger and result.signals:
            self.logger.debug(
                "internal.signal_detection.usecase.detect: Signals fired",
                extra={
                    "total": stats.total,
                    "min_volume": thresholds.min_volume,
                    "delta_pct": round(result.delta_pct, 2),
                    "z_score": round(result.volume_z_score, 2),
                    "signals": [signal.type.value for signal in result.signals],
                },
            )
        return result


__all__ = ["SignalDetection", "detect_signals"]
