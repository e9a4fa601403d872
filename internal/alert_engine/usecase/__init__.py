from .new import New
from .usecase import AlertEngine
from .process import evaluate_scope
from .helpers import (
    format_compact,
    format_signed_compact,
    build_summary,
    build_title,
    group_posts,
    is_redundant,
    dedup_alerts,
    rank_alerts,
)

__all__ = [
    "New",
    "AlertEngine",
    "evaluate_scope",
    "format_compact",
    "format_signed_compact",
    "build_summary",
    "build_title",
    "group_posts",
    "is_redundant",
    "dedup_alerts",
    "rank_alerts",
]
