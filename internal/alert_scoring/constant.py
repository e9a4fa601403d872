"""Constants for alert scoring and classification."""

from internal.model import Severity, SignalType

# Composite score weights (each term capped to 0..100 first)
WEIGHT_VOLUME = 0.25
WEIGHT_RISK = 0.25
WEIGHT_NEGATIVITY = 0.20
WEIGHT_IMPACT = 0.20
WEIGHT_Z_SCORE = 0.10
Z_SCORE_SCALE = 20
TERM_CAP = 100.0

# Composite severity tiers, highest first
COMPOSITE_SEVERITY_TIERS = (
    (85.0, Severity.CRITICAL),
    (70.0, Severity.HIGH),
    (55.0, Severity.MEDIUM),
)

# Per-signal severity cut-offs: (critical, high, medium) on signal.value
SIGNAL_SEVERITY_TIERS = {
    SignalType.VOLUME: (60.0, 45.0, 30.0),
    SignalType.SENTIMENT_SHIFT: (25.0, 18.0, 10.0),
    SignalType.TOPIC_NOVELTY: (80.0, 65.0, 50.0),
    SignalType.CROSS_PLATFORM: (4.0, 3.0, 2.0),
    SignalType.COORDINATION: (35.0, 25.0, 18.0),
    SignalType.GEO_EXPANSION: (60.0, 45.0, 30.0),
    SignalType.NEGATIVITY: (45.0, 40.0, 35.0),
    SignalType.RISK: (60.0, 50.0, 45.0),
}
# Viral (and any unlisted type) is tiered on the impact ratio
IMPACT_RATIO_SEVERITY_TIERS = (1.6, 1.45, 1.3)

# Confidence blend
CONFIDENCE_WEIGHT_VOLUME = 0.45
CONFIDENCE_WEIGHT_SIGNALS = 0.35
CONFIDENCE_WEIGHT_STABILITY = 0.20
CONFIDENCE_SIGNAL_SATURATION = 3

# Priority
PRIORITY_SEVERITY_FACTOR = 20
PRIORITY_RISK_FACTOR = 0.6
PRIORITY_RISK_CAP = 40
PRIORITY_CAP = 100

# Ranking bonus per fired signal
RANKING_SIGNAL_BONUS = 5
RANKING_SIGNAL_BONUS_CAP = 20
