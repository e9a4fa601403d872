"""Alert Report - dashboard and detail views over evaluated alerts."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Sequence

from pkg.logger.logger import Logger
from internal.model import Alert, Post
from internal.alert_engine import IAlertEngine
from internal.alert_state import IAlertStateUseCase
from ..errors import ErrAlertNotFound
from ..interface import IAlertReport
from ..type import (
    AlertDetail,
    BaselineStats,
    Config,
    DashboardSnapshot,
    PulseStats,
    Query,
    RuleStat,
    TimelinePoint,
    Window,
)
from utils.time_utils import ensure_utc, utc_now
from .alerts import (
    build_history,
    build_parent_index,
    filter_alerts,
    paginate,
    related_alerts,
    sort_alerts,
)
from .stats import (
    build_baseline_stats,
    build_pulse_stats,
    build_rule_stats,
    build_timeline,
    format_range,
)
from .window import build_window, filter_posts


@dataclass(frozen=True)
class _Evaluation:
    window: Window
    alerts: list[Alert]
    prev_alerts: list[Alert]
    pulse_stats: PulseStats
    baseline_stats: BaselineStats
    timeline: list[TimelinePoint]
    rules: list[RuleStat]


class AlertReport(IAlertReport):
    """Builds the alert dashboard and the per-alert detail view.

    Both views evaluate the current window against the previous one and
    the previous window against the one before it, so every headline
    number has a comparable baseline.
    """

    def __init__(
        self,
        config: Config,
        engine: IAlertEngine,
        state: Optional[IAlertStateUseCase] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.engine = engine
        self.state = state
        self.logger = logger

    def _evaluate(self, posts: Sequence[Post], query: Query, now: datetime) -> _Evaluation:
        if query.timeframe is None:
            query = _with_timeframe(query, self.config.default_timeframe)

        matching = filter_posts(posts, query)
        window = build_window(matching, query, now)

        alerts = self.engine.evaluate(window.current_posts, window.prev_posts, now=now)
        prev_alerts = self.engine.evaluate(window.prev_posts, window.prev_prev_posts, now=now)
        if self.state is not None:
            alerts = self.state.merge(alerts)

        alerts = filter_alerts(alerts, query)
        prev_alerts = filter_alerts(prev_alerts, query)

        return _Evaluation(
            window=window,
            alerts=alerts,
            prev_alerts=prev_alerts,
            pulse_stats=build_pulse_stats(
                alerts,
                prev_alerts,
                format_range(window.start, window.end),
                window.end,
                window.prev_end,
            ),
            baseline_stats=build_baseline_stats(prev_alerts, window.prev_end),
            timeline=build_timeline(alerts, window.start, window.end),
            rules=build_rule_stats(alerts, self.config.thresholds),
        )

    def dashboard(
        self,
        posts: Sequence[Post],
        query: Optional[Query] = None,
        now: Optional[datetime] = None,
    ) -> DashboardSnapshot:
        """Evaluate, filter, sort and page alerts for the dashboard.

        Args:
            posts: Post batch covering all three windows
            query: Filters, window, sort and paging (defaults when None)
            now: Evaluation clock (defaults to the current UTC time)

        Returns:
            DashboardSnapshot
        """
        query = query or Query()
        now = ensure_utc(now) if now else utc_now()
        evaluation = self._evaluate(posts, query, now)

        ordered = sort_alerts(evaluation.alerts, query.sort)
        page, next_cursor = paginate(ordered, query.cursor, query.limit or self.config.page_limit)

        if self.logger:
            self.logger.info(
                "internal.alert_report.usecase.dashboard: Dashboard built",
                extra={
                    "posts": len(posts),
                    "current_posts": len(evaluation.window.current_posts),
                    "alerts": len(evaluation.alerts),
                    "page": len(page),
                    "sort": query.sort,
                },
            )

        return DashboardSnapshot(
            alerts=page,
            total=len(evaluation.alerts),
            next_cursor=next_cursor,
            pulse_stats=evaluation.pulse_stats,
            baseline_stats=evaluation.baseline_stats,
            timeline=evaluation.timeline,
            rules=evaluation.rules,
            window=evaluation.window,
        )

    def detail(
        self,
        alert_id: str,
        posts: Sequence[Post],
        query: Optional[Query] = None,
        now: Optional[datetime] = None,
    ) -> AlertDetail:
        """Single alert with history and related alerts.

        Raises:
            ValueError: empty alert_id
            ErrAlertNotFound: alert_id is not among the filtered alerts
        """
        if not alert_id:
            raise ValueError("alert_id is required")
        query = query or Query()
        now = ensure_utc(now) if now else utc_now()
        evaluation = self._evaluate(posts, query, now)

        alert = next((item for item in evaluation.alerts if item.id == alert_id), None)
        if alert is None:
            if self.logger:
                self.logger.warning(
                    "internal.alert_report.usecase.detail: Alert not found",
                    extra={"alert_id": alert_id, "alerts": len(evaluation.alerts)},
                )
            raise ErrAlertNotFound(f"alert not found: {alert_id}")

        related = related_alerts(
            alert,
            evaluation.alerts,
            build_parent_index(evaluation.window.current_posts),
            query.sort,
            self.config.max_related,
        )

        return AlertDetail(
            alert=alert,
            history=build_history(alert, evaluation.prev_alerts, evaluation.window),
            related_alerts=related,
            pulse_stats=evaluation.pulse_stats,
            baseline_stats=evaluation.baseline_stats,
            timeline=evaluation.timeline,
            rules=evaluation.rules,
            window=evaluation.window,
        )


def _with_timeframe(query: Query, timeframe: str) -> Query:
    return replace(query, timeframe=timeframe)


__all__ = ["AlertReport"]
