"""Window statistics domain.

Aggregates a post batch into the WindowStats snapshot every detector reads.
"""

from .constant import *
from .type import WindowStats
from .usecase import (
    build_stats,
    calc_baseline_impact,
    build_daily_counts,
    resolve_min_volume,
    calc_risk_score,
    extract_tokens,
)

__all__ = [
    "WindowStats",
    "build_stats",
    "calc_baseline_impact",
    "build_daily_counts",
    "resolve_min_volume",
    "calc_risk_score",
    "extract_tokens",
]
