from dataclasses import replace
from datetime import datetime
from typing import Optional

from pkg.logger.logger import Logger
from internal.model import Alert, AlertMetrics, AlertStatus
from internal.alert_engine.type import ScopeTask, ScoredAlert
from internal.alert_identity import build_evidence, build_instance_id, build_stable_id
from internal.alert_scoring import score_alert
from internal.signal_detection import DetectionContext, ISignalDetection, Thresholds
from internal.window_stats import (
    build_daily_counts,
    build_stats,
    resolve_min_volume,
)
from .helpers import build_summary, build_title, scope_label


def evaluate_scope(
    task: ScopeTask,
    thresholds: Thresholds,
    baseline_impact: float,
    signal_detection: ISignalDetection,
    now: datetime,
    logger: Optional[Logger] = None,
) -> Optional[ScoredAlert]:
    """Evaluate one scope; None when no signal fires.

    thresholds.min_volume is the batch-wide base; the scope's own floor is
    resolved here from its previous-window daily cadence.
    """
    scope = task.scope
    stats = build_stats(task.current_posts, task.prev_posts)
    prev_stats = build_stats(task.prev_posts)
    impact_ratio = stats.impact_score / baseline_impact if baseline_impact else 0.0
    baseline_daily = build_daily_counts(task.prev_posts)
    min_volume = resolve_min_volume(thresholds.min_volume, baseline_daily, stats.total)

    detection = signal_detection.detect(
        stats,
        prev_stats,
        impact_ratio,
        replace(thresholds, min_volume=min_volume),
        DetectionContext(
            current_posts=task.current_posts,
            prev_posts=task.prev_posts,
            baseline_daily=baseline_daily,
        ),
    )
    if not detection.signals:
        return None

    card = score_alert(stats, prev_stats, detection, impact_ratio, min_volume)
    first_seen_at = stats.earliest_at or now
    last_seen_at = stats.latest_at or now

    alert = Alert(
        id=scope.key,
        stable_id=build_stable_id(scope),
        instance_id=build_instance_id(scope, card.primary_signal.type, last_seen_at),
        title=build_title(scope, card.primary_signal),
        summary=build_summary(stats, prev_stats),
        scope_type=scope.type.value,
        scope_id=scope.id,
        scope_label=scope_label(scope),
        severity=card.severity,
        status=AlertStatus.OPEN,
        priority=card.priority,
        confidence=card.confidence,
        metrics=AlertMetrics(
            volume_current=stats.total,
            volume_prev=prev_stats.total,
            volume_delta_pct=detection.delta_pct,
            negative_share=stats.negative_share,
            risk_score=stats.risk_score,
            reach=stats.reach,
            engagement=stats.engagement,
            engagement_rate=stats.engagement_rate,
            impact_score=stats.impact_score,
            impact_ratio=impact_ratio,
        ),
        signals=list(detection.signals),
        rule_ids=[signal.type.value for signal in detection.signals],
        rule_values=dict(detection.rule_values),
        top_topics=list(stats.top_topics),
        top_entities=list(stats.top_entities),
        keywords=list(stats.keywords),
        unique_authors=stats.unique_authors,
        new_authors_pct=stats.new_authors_pct,
        geo_spread=stats.geo_spread,
        evidence=build_evidence(task.current_posts),
        created_at=first_seen_at,
        first_seen_at=first_seen_at,
        last_seen_at=last_seen_at,
        last_status_at=now,
    )

    if logger:
        logger.debug(
            "internal.alert_engine.usecase.evaluate_scope: Alert raised",
            extra={
                "scope": scope.key,
                "total": stats.total,
                "min_volume": min_volume,
                "severity": card.severity.value,
                "primary": card.primary_signal.type.value,
                "score": round(card.ranking_score, 2),
            },
        )

    return ScoredAlert(
        alert=alert,
        score=card.ranking_score,
        primary_signal=card.primary_signal.type,
        scope=scope,
        parent=task.parent,
    )


__all__ = ["evaluate_scope"]
