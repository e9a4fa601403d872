from .constant import *
from .post import Post, Location, ErrInvalidPost
from .scope import ScopeType, Scope, ScopeSpec, SCOPE_SPECS
from .alert import (
    SignalType,
    Severity,
    AlertStatus,
    NamedCount,
    KeywordCount,
    Signal,
    RuleValue,
    AlertMetrics,
    Alert,
    serialize,
)

__all__ = [
    # Post
    "Post",
    "Location",
    "ErrInvalidPost",
    # Scope
    "ScopeType",
    "Scope",
    "ScopeSpec",
    "SCOPE_SPECS",
    # Alert
    "SignalType",
    "Severity",
    "AlertStatus",
    "NamedCount",
    "KeywordCount",
    "Signal",
    "RuleValue",
    "AlertMetrics",
    "Alert",
    "serialize",
    # Constants
    "SENTIMENT_POSITIVE",
    "SENTIMENT_NEUTRAL",
    "SENTIMENT_NEGATIVE",
    "OVERALL_SCOPE_ID",
    "OVERALL_SCOPE_LABEL",
]
