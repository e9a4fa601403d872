"""Constants for alert identity and evidence selection."""

from internal.model import SENTIMENT_NEGATIVE, SENTIMENT_NEUTRAL, SENTIMENT_POSITIVE

STABLE_ID_PREFIX = "al_"
INSTANCE_ID_PREFIX = "ai_"

# 32-bit FNV-1a
FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
UINT32_MASK = 0xFFFFFFFF

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

# Evidence
EVIDENCE_LIMIT = 5
EVIDENCE_WEIGHT_REACH = 0.6
EVIDENCE_WEIGHT_ENGAGEMENT = 0.4
EVIDENCE_SENTIMENT_BOOST = {
    SENTIMENT_NEGATIVE: 1.2,
    SENTIMENT_NEUTRAL: 1.0,
    SENTIMENT_POSITIVE: 0.9,
}
