"""Constants for the alert report layer."""

from internal.model import SignalType

# Window length per timeframe in hours; 0 means the whole batch
TIMEFRAME_HOURS = {
    "24h": 24,
    "72h": 72,
    "7d": 24 * 7,
    "1m": 24 * 30,
    "todo": 0,
}
DEFAULT_TIMEFRAME = "todo"

# Filter value meaning "no filter"
ALL_FILTER = "todos"

SORT_SCORE = "score"
SORT_KEYS = ("score", "severity", "priority", "recent", "volume", "risk", "impact")
RELATED_SORT_KEYS = ("score", "severity", "recent")

DEFAULT_MAX_RELATED = 6
DEFAULT_PAGE_LIMIT = 32
MAX_PAGE_LIMIT = 200

MONTH_ABBR = ("ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sep", "oct", "nov", "dic")
RANGE_SEPARATOR = " — "

# Rule catalog: id, label, threshold text template over Thresholds fields
RULE_CATALOG = (
    (SignalType.VOLUME, "Spike de volumen", "≥ {volume_spike_pct}% o z≥{volume_z_score}"),
    (SignalType.SENTIMENT_SHIFT, "Cambio de negatividad", "≥ {sentiment_shift_pct}%"),
    (SignalType.NEGATIVITY, "Negatividad alta", "≥ {negativity_pct}%"),
    (SignalType.RISK, "Riesgo reputacional", "≥ {risk_score} pts"),
    (SignalType.VIRAL, "Viralidad", "≥ {viral_impact_ratio}x + {viral_delta_pct}%"),
    (SignalType.TOPIC_NOVELTY, "Temas nuevos", "≥ {topic_novelty_pct}%"),
    (SignalType.CROSS_PLATFORM, "Spike multi-plataforma", "≥ {cross_platform_min_platforms} plataformas"),
    (SignalType.COORDINATION, "Coordinación", "≥ {coordination_ratio}%"),
    (SignalType.GEO_EXPANSION, "Expansión geográfica", "≥ {geo_spread_delta_pct}%"),
)
