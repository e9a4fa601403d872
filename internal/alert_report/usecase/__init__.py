from .new import New
from .usecase import AlertReport
from .window import build_window, filter_posts
from .stats import (
    build_rule_stats,
    build_timeline,
    calc_sla_hours,
    build_pulse_stats,
    build_baseline_stats,
    format_day,
    format_range,
)
from .alerts import (
    filter_alerts,
    sort_alerts,
    paginate,
    build_parent_index,
    related_alerts,
    build_history,
)

__all__ = [
    "New",
    "AlertReport",
    "build_window",
    "filter_posts",
    "build_rule_stats",
    "build_timeline",
    "calc_sla_hours",
    "build_pulse_stats",
    "build_baseline_stats",
    "format_day",
    "format_range",
    "filter_alerts",
    "sort_alerts",
    "paginate",
    "build_parent_index",
    "related_alerts",
    "build_history",
]
