"""Constants for window statistics aggregation."""

TOP_TOPICS_LIMIT = 3
TOP_ENTITIES_LIMIT = 4
KEYWORDS_LIMIT = 6
KEYWORD_MIN_LENGTH = 4

# Reputational risk weights per sentiment bucket
RISK_WEIGHT_NEGATIVE = 1.2
RISK_WEIGHT_NEUTRAL = 0.5
RISK_WEIGHT_POSITIVE = -0.3

# Per-post impact blend (reach vs engagement)
IMPACT_WEIGHT_REACH = 0.6
IMPACT_WEIGHT_ENGAGEMENT = 0.4

# Dynamic volume floor
MIN_VOLUME_TOTAL_FACTOR = 0.01
MIN_VOLUME_MEDIAN_FACTOR = 1.2
MIN_VOLUME_FLOOR = 3

KEYWORD_STOPWORDS = frozenset(
    {
        "que", "para", "como", "porque", "cuando", "donde", "este", "esta",
        "estos", "estas", "unos", "unas", "sobre", "desde", "hasta", "entre",
        "todo", "toda", "todas", "todos", "pero", "por", "con", "sin", "del",
        "las", "los", "una", "uno", "the", "and", "for", "with", "this", "that",
    }
)

__all__ = [
    "TOP_TOPICS_LIMIT",
    "TOP_ENTITIES_LIMIT",
    "KEYWORDS_LIMIT",
    "KEYWORD_MIN_LENGTH",
    "RISK_WEIGHT_NEGATIVE",
    "RISK_WEIGHT_NEUTRAL",
    "RISK_WEIGHT_POSITIVE",
    "IMPACT_WEIGHT_REACH",
    "IMPACT_WEIGHT_ENGAGEMENT",
    "MIN_VOLUME_TOTAL_FACTOR",
    "MIN_VOLUME_MEDIAN_FACTOR",
    "MIN_VOLUME_FLOOR",
    "KEYWORD_STOPWORDS",
]
