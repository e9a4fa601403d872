from dataclasses import dataclass

from internal.model import Severity, Signal


@dataclass(frozen=True)
class ScoreCard:
    """Classification of one scope's fired signals."""

    composite_score: float
    severity: Severity
    primary_signal: Signal
    confidence: int
    priority: int
    ranking_score: float


__all__ = ["ScoreCard"]
