"""Alert Scoring Domain.

Composite score, severity, confidence, priority and ranking score.
"""

from .constant import *
from .type import ScoreCard
from .usecase import (
    calc_composite_score,
    resolve_composite_severity,
    resolve_signal_severity,
    pick_primary_signal,
    calc_confidence,
    calc_priority,
    calc_ranking_score,
    score_alert,
)

__all__ = [
    "ScoreCard",
    "calc_composite_score",
    "resolve_composite_severity",
    "resolve_signal_severity",
    "pick_primary_signal",
    "calc_confidence",
    "calc_priority",
    "calc_ranking_score",
    "score_alert",
]
