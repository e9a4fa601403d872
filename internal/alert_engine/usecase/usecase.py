"""Alert Engine - scope walk, deduplication and ranking."""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from pkg.logger.logger import Logger
from internal.model import Alert, Post, Scope, SCOPE_SPECS
from internal.alert_engine.constant import BATCH_MIN_VOLUME_FACTOR
from internal.alert_engine.interface import IAlertEngine
from internal.alert_engine.type import Config, ScopeTask, ScoredAlert
from internal.alert_lifecycle import ILifecycleSimulator
from internal.signal_detection import ISignalDetection, Thresholds
from internal.window_stats import calc_baseline_impact
from utils.number_utils import round_half_up
from utils.time_utils import ensure_utc, utc_now
from .helpers import dedup_alerts, group_posts, rank_alerts
from .process import evaluate_scope


class AlertEngine(IAlertEngine):
    """Evaluates the overall scope and every grouped scope of a batch.

    Steps per call:
    1. Resolve thresholds (config + overrides) and the base min volume
    2. Evaluate overall, then cluster/subcluster/microcluster/city/platform
    3. Drop children that repeat their parent, rank by score, cap
    4. Hand the ranked alerts to the lifecycle simulator
    """

    def __init__(
        self,
        config: Config,
        signal_detection: ISignalDetection,
        lifecycle: ILifecycleSimulator,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.signal_detection = signal_detection
        self.lifecycle = lifecycle
        self.logger = logger

    def resolve_thresholds(
        self, current_total: int, overrides: Optional[Mapping[str, Any]] = None
    ) -> Thresholds:
        """Thresholds for one call, with the batch-wide base min volume.

        Raises:
            ErrInvalidThreshold: unknown or non-numeric override
        """
        thresholds = self.config.thresholds.with_overrides(overrides)
        base_min = max(
            thresholds.min_volume,
            round_half_up(current_total * BATCH_MIN_VOLUME_FACTOR),
        )
        return thresholds.with_overrides({"min_volume": base_min})

    def build_tasks(
        self, current_posts: Sequence[Post], prev_posts: Sequence[Post]
    ) -> list[ScopeTask]:
        tasks = [ScopeTask(Scope.overall(), list(current_posts), list(prev_posts))]
        for spec in SCOPE_SPECS:
            groups = group_posts(current_posts, spec.key)
            prev_groups = group_posts(prev_posts, spec.key)
            for scope_id, group in groups.items():
                tasks.append(
                    ScopeTask(
                        scope=Scope(spec.type, scope_id),
                        current_posts=group,
                        prev_posts=prev_groups.get(scope_id, []),
                        parent=spec.parent_of(group),
                    )
                )
        return tasks

    def evaluate(
        self,
        current_posts: Sequence[Post],
        prev_posts: Sequence[Post],
        threshold_overrides: Optional[Mapping[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> list[Alert]:
        """Compare two windows of posts and return ranked alerts.

        Args:
            current_posts: Posts of the current window
            prev_posts: Posts of the previous window of equal length
            threshold_overrides: Per-call threshold overrides
            now: Evaluation clock (defaults to the current UTC time)

        Returns:
            At most config.max_alerts alerts, highest score first

        Raises:
            ErrInvalidThreshold: invalid threshold override
        """
        now = ensure_utc(now) if now else utc_now()
        thresholds = self.resolve_thresholds(len(current_posts), threshold_overrides)
        baseline_impact = calc_baseline_impact(current_posts)
        tasks = self.build_tasks(current_posts, prev_posts)

        def run(task: ScopeTask) -> Optional[ScoredAlert]:
            return evaluate_scope(
                task,
                thresholds,
                baseline_impact,
                self.signal_detection,
                now,
                self.logger,
            )

        if self.config.max_workers > 1 and len(tasks) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                # map() yields in submission order
                results = list(executor.map(run, tasks))
        else:
            results = [run(task) for task in tasks]

        scored = [item for item in results if item is not None]
        deduped = dedup_alerts(scored)
        ranked = rank_alerts(deduped, self.config.max_alerts)
        alerts = self.lifecycle.simulate([item.alert for item in ranked], now)

        if self.logger:
            self.logger.info(
                "internal.alert_engine.usecase.evaluate: Evaluation completed",
                extra={
                    "current_posts": len(current_posts),
                    "prev_posts": len(prev_posts),
                    "scopes": len(tasks),
                    "fired": len(scored),
                    "deduplicated": len(scored) - len(deduped),
                    "returned": len(alerts),
                    "base_min_volume": thresholds.min_volume,
                },
            )
        return alerts


__all__ = ["AlertEngine"]
