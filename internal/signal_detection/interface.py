from typing import Optional, Protocol, runtime_checkable

from internal.window_stats import WindowStats
from .type import Thresholds, DetectionContext, DetectionResult


@runtime_checkable
class ISignalDetection(Protocol):
    """Protocol for signal detection."""

    def detect(
        self,
        stats: WindowStats,
        prev_stats: WindowStats,
        impact_ratio: float,
        thresholds: Thresholds,
        context: Optional[DetectionContext] = None,
    ) -> DetectionResult:
        """Compare current vs previous stats and return fired signals."""
        ...


__all__ = ["ISignalDetection"]
