"""Constants for signal detection."""

from internal.model import SignalType

# Default rule thresholds
DEFAULT_MIN_VOLUME = 40
DEFAULT_VOLUME_SPIKE_PCT = 30.0
DEFAULT_VOLUME_Z_SCORE = 2.0
DEFAULT_NEGATIVITY_PCT = 35.0
DEFAULT_RISK_SCORE = 45.0
DEFAULT_VIRAL_IMPACT_RATIO = 1.3
DEFAULT_VIRAL_DELTA_PCT = 20.0
DEFAULT_SENTIMENT_SHIFT_PCT = 10.0
DEFAULT_TOPIC_NOVELTY_PCT = 60.0
DEFAULT_CROSS_PLATFORM_DELTA_PCT = 25.0
DEFAULT_CROSS_PLATFORM_MIN_PLATFORMS = 2
DEFAULT_COORDINATION_RATIO = 18.0
DEFAULT_GEO_SPREAD_DELTA_PCT = 25.0

# Wire names used by dashboard clients for threshold overrides
THRESHOLD_ALIASES = {
    "minVolume": "min_volume",
    "volumeSpikePct": "volume_spike_pct",
    "volumeZScore": "volume_z_score",
    "negativityPct": "negativity_pct",
    "riskScore": "risk_score",
    "viralImpactRatio": "viral_impact_ratio",
    "viralDeltaPct": "viral_delta_pct",
    "sentimentShiftPct": "sentiment_shift_pct",
    "topicNoveltyPct": "topic_novelty_pct",
    "crossPlatformDeltaPct": "cross_platform_delta_pct",
    "crossPlatformMinPlatforms": "cross_platform_min_platforms",
    "coordinationRatio": "coordination_ratio",
    "geoSpreadDeltaPct": "geo_spread_delta_pct",
}

SIGNAL_LABELS = {
    SignalType.VOLUME: "Volumen en alza",
    SignalType.SENTIMENT_SHIFT: "Cambio de negatividad",
    SignalType.NEGATIVITY: "Negatividad alta",
    SignalType.RISK: "Riesgo reputacional",
    SignalType.VIRAL: "Viralidad en aumento",
    SignalType.TOPIC_NOVELTY: "Temas nuevos emergentes",
    SignalType.CROSS_PLATFORM: "Spike multi-plataforma",
    SignalType.COORDINATION: "Coordinación detectada",
    SignalType.GEO_EXPANSION: "Expansión geográfica",
}

# Volume z-score is scaled into the same range as delta percentages
VOLUME_Z_SCORE_SCALE = 10

# Cross-platform per-platform floor: max(3, round(min_volume * 0.25))
PLATFORM_MIN_VOLUME_FLOOR = 3
PLATFORM_MIN_VOLUME_FACTOR = 0.25

# Coordination content key
COORDINATION_CONTENT_KEY_LENGTH = 160
COORDINATION_MIN_AUTHORS = 2
URL_PATTERN = r"https?://\S+"
