from typing import Final

# Post sentiment labels (Spanish, as stored by the feed)
SENTIMENT_POSITIVE: Final[str] = "positivo"
SENTIMENT_NEUTRAL: Final[str] = "neutral"
SENTIMENT_NEGATIVE: Final[str] = "negativo"
SENTIMENTS: Final[frozenset] = frozenset(
    {SENTIMENT_POSITIVE, SENTIMENT_NEUTRAL, SENTIMENT_NEGATIVE}
)

OVERALL_SCOPE_ID: Final[str] = "overall"
OVERALL_SCOPE_LABEL: Final[str] = "Panorama general"

# Severity ordering weight (critical=4 ... low=1)
SEVERITY_WEIGHTS: Final[dict] = {
    "critical": 4,
    "high": 3,
    "medium": 2,
    "low": 1,
}
