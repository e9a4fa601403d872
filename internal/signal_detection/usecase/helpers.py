import re
from collections import Counter
from typing import Optional

from internal.model import Signal, SignalType, RuleValue
from internal.signal_detection.constant import (
    SIGNAL_LABELS,
    VOLUME_Z_SCORE_SCALE,
    PLATFORM_MIN_VOLUME_FLOOR,
    PLATFORM_MIN_VOLUME_FACTOR,
    COORDINATION_CONTENT_KEY_LENGTH,
    COORDINATION_MIN_AUTHORS,
    URL_PATTERN,
)
from internal.signal_detection.type import Thresholds, DetectionContext
from internal.window_stats import WindowStats
from utils.number_utils import mean_std, pct_change, round_half_up

_URL_RE = re.compile(URL_PATTERN)

Fired = Optional[tuple[Signal, RuleValue]]


def _signal(signal_type: SignalType, value: float, delta_pct: Optional[float] = None) -> Signal:
    return Signal(
        type=signal_type,
        label=SIGNAL_LABELS[signal_type],
        value=value,
        delta_pct=delta_pct,
    )


def volume_z_score(total: int, baseline_daily) -> float:
    mean, std = mean_std(baseline_daily)
    if std <= 0:
        return 0.0
    return (total - mean) / std


def detect_volume(
    stats: WindowStats, delta_pct: float, z_score: float, thresholds: Thresholds
) -> Fired:
    if delta_pct < thresholds.volume_spike_pct and z_score < thresholds.volume_z_score:
        return None
    return (
        _signal(
            SignalType.VOLUME,
            max(delta_pct, z_score * VOLUME_Z_SCORE_SCALE),
            delta_pct=delta_pct,
        ),
        RuleValue(
            value=delta_pct,
            threshold=thresholds.volume_spike_pct,
            delta_pct=delta_pct,
            z_score=z_score,
            z_threshold=thresholds.volume_z_score,
            min_volume=thresholds.min_volume,
        ),
    )


def detect_sentiment_shift(
    stats: WindowStats, prev_stats: WindowStats, thresholds: Thresholds
) -> Fired:
    shift = stats.negative_share - prev_stats.negative_share
    if shift < thresholds.sentiment_shift_pct:
        return None
    return (
        _signal(SignalType.SENTIMENT_SHIFT, shift),
        RuleValue(value=shift, threshold=thresholds.sentiment_shift_pct),
    )


def detect_negativity(stats: WindowStats, thresholds: Thresholds) -> Fired:
    if stats.negative_share < thresholds.negativity_pct:
        return None
    return (
        _signal(SignalType.NEGATIVITY, stats.negative_share),
        RuleValue(value=stats.negative_share, threshold=thresholds.negativity_pct),
    )


def detect_risk(stats: WindowStats, thresholds: Thresholds) -> Fired:
    if stats.risk_score < thresholds.risk_score:
        return None
    return (
        _signal(SignalType.RISK, stats.risk_score),
        RuleValue(value=stats.risk_score, threshold=thresholds.risk_score),
    )


def detect_viral(impact_ratio: float, delta_pct: float, thresholds: Thresholds) -> Fired:
    if impact_ratio < thresholds.viral_impact_ratio or delta_pct < thresholds.viral_delta_pct:
        return None
    return (
        _signal(SignalType.VIRAL, impact_ratio, delta_pct=delta_pct),
        RuleValue(
            value=impact_ratio,
            threshold=thresholds.viral_impact_ratio,
            delta_pct=delta_pct,
            delta_threshold=thresholds.viral_delta_pct,
        ),
    )


def topic_novelty_pct(stats: WindowStats, prev_stats: WindowStats) -> float:
    current = stats.topic_names
    if not current:
        return 0.0
    previous = set(prev_stats.topic_names)
    novel = [topic for topic in current if topic not in previous]
    return len(novel) / len(current) * 100


def detect_topic_novelty(
    stats: WindowStats, prev_stats: WindowStats, thresholds: Thresholds
) -> Fired:
    novelty = topic_novelty_pct(stats, prev_stats)
    if novelty < thresholds.topic_novelty_pct:
        return None
    return (
        _signal(SignalType.TOPIC_NOVELTY, novelty),
        RuleValue(value=novelty, threshold=thresholds.topic_novelty_pct),
    )


def count_spiking_platforms(context: DetectionContext, thresholds: Thresholds) -> int:
    current = Counter(post.platform for post in context.current_posts)
    previous = Counter(post.platform for post in context.prev_posts)
    floor = max(
        PLATFORM_MIN_VOLUME_FLOOR,
        round_half_up(thresholds.min_volume * PLATFORM_MIN_VOLUME_FACTOR),
    )
    return sum(
        1
        for platform, count in current.items()
        if count >= floor
        and pct_change(count, previous.get(platform, 0)) >= thresholds.cross_platform_delta_pct
    )


def detect_cross_platform(context: DetectionContext, thresholds: Thresholds) -> Fired:
    platforms = count_spiking_platforms(context, thresholds)
    if platforms < thresholds.cross_platform_min_platforms:
        return None
    return (
        _signal(SignalType.CROSS_PLATFORM, platforms),
        RuleValue(value=platforms, threshold=thresholds.cross_platform_min_platforms),
    )


def content_key(text: str) -> str:
    return _URL_RE.sub("", (text or "").lower())[:COORDINATION_CONTENT_KEY_LENGTH]


def coordination_ratio(stats: WindowStats, context: DetectionContext) -> float:
    """Share of posts whose normalized content is shared by 2+ authors."""
    if not stats.total:
        return 0.0

    authors: dict[str, set[str]] = {}
    counts: Counter = Counter()
    for post in context.current_posts:
        key = content_key(post.content)
        author = post.author_key.lower()
        if not key or not author:
            continue
        authors.setdefault(key, set()).add(author)
        counts[key] += 1

    coordinated = sum(
        counts[key] for key, names in authors.items() if len(names) >= COORDINATION_MIN_AUTHORS
    )
    return min(100.0, coordinated / stats.total * 100)


def detect_coordination(
    stats: WindowStats, context: DetectionContext, thresholds: Thresholds
) -> Fired:
    ratio = coordination_ratio(stats, context)
    if ratio < thresholds.coordination_ratio:
        return None
    return (
        _signal(SignalType.COORDINATION, ratio),
        RuleValue(value=ratio, threshold=thresholds.coordination_ratio),
    )


def detect_geo_expansion(
    stats: WindowStats, prev_stats: WindowStats, thresholds: Thresholds
) -> Fired:
    delta = pct_change(stats.geo_spread, prev_stats.geo_spread)
    if delta < thresholds.geo_spread_delta_pct:
        return None
    return (
        _signal(SignalType.GEO_EXPANSION, delta),
        RuleValue(value=delta, threshold=thresholds.geo_spread_delta_pct),
    )
