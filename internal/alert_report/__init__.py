"""Alert Report Domain.

Dashboard and detail views: post windowing and filters, pulse and
baseline counters, daily timeline, rule catalog, related alerts and
per-window history.
"""

from .constant import *
from .errors import ErrAlertNotFound, ErrInvalidQuery
from .interface import IAlertReport
from .type import (
    Config,
    Query,
    Window,
    RuleStat,
    TimelinePoint,
    PulseDeltas,
    PulseStats,
    BaselineStats,
    HistoryEntry,
    DashboardSnapshot,
    AlertDetail,
    parse_list,
    parse_limit,
    parse_cursor,
)
from .usecase import (
    New,
    AlertReport,
    build_window,
    filter_posts,
    build_rule_stats,
    build_timeline,
    calc_sla_hours,
    build_pulse_stats,
    build_baseline_stats,
    format_day,
    format_range,
    filter_alerts,
    sort_alerts,
    paginate,
    build_parent_index,
    related_alerts,
    build_history,
)

__all__ = [
    "ErrAlertNotFound",
    "ErrInvalidQuery",
    "IAlertReport",
    "Config",
    "Query",
    "Window",
    "RuleStat",
    "TimelinePoint",
    "PulseDeltas",
    "PulseStats",
    "BaselineStats",
    "HistoryEntry",
    "DashboardSnapshot",
    "AlertDetail",
    "parse_list",
    "parse_limit",
    "parse_cursor",
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
