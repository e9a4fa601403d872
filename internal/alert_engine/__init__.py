"""Alert Engine Domain.

Walks every analytical scope of a post batch, raises scored alerts for the
scopes whose signals fire, removes children that repeat their parent and
returns the top alerts with lifecycle state attached.
"""

from .constant import *
from .interface import IAlertEngine
from .type import Config, ScopeTask, ScoredAlert
from .usecase import (
    New,
    AlertEngine,
    evaluate_scope,
    format_compact,
    format_signed_compact,
    build_summary,
    build_title,
    group_posts,
    dedup_alerts,
    rank_alerts,
)

__all__ = [
    "IAlertEngine",
    "Config",
    "ScopeTask",
    "ScoredAlert",
    "New",
    "AlertEngine",
    "evaluate_scope",
    "format_compact",
    "format_signed_compact",
    "build_summary",
    "build_title",
    "group_posts",
    "dedup_alerts",
    "rank_alerts",
    "DEFAULT_MAX_ALERTS",
]
