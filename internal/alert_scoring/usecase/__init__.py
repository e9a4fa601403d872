from .alert_scoring import (
    calc_composite_score,
    resolve_composite_severity,
    resolve_signal_severity,
    pick_primary_signal,
    calc_confidence,
    calc_priority,
    calc_ranking_score,
    score_alert,
)
