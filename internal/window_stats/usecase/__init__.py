from .window_stats import (
    build_stats,
    calc_baseline_impact,
    build_daily_counts,
    resolve_min_volume,
)
from .helpers import calc_risk_score, extract_tokens

__all__ = [
    "build_stats",
    "calc_baseline_impact",
    "build_daily_counts",
    "resolve_min_volume",
    "calc_risk_score",
    "extract_tokens",
]
