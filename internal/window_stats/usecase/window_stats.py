"""Window statistics aggregation.

Reduces a post batch into a WindowStats snapshot and provides the baseline
helpers the detectors need (daily histogram, dynamic volume floor and the
global impact baseline).
"""

from collections import Counter
from typing import Iterable, Sequence

from internal.model import Post, SENTIMENT_NEGATIVE
from internal.window_stats.constant import (
    TOP_TOPICS_LIMIT,
    TOP_ENTITIES_LIMIT,
    KEYWORDS_LIMIT,
    IMPACT_WEIGHT_REACH,
    IMPACT_WEIGHT_ENGAGEMENT,
    MIN_VOLUME_TOTAL_FACTOR,
    MIN_VOLUME_MEDIAN_FACTOR,
    MIN_VOLUME_FLOOR,
)
from internal.window_stats.type import WindowStats
from utils.number_utils import median, round_half_up
from utils.time_utils import day_key
from .helpers import (
    author_set,
    build_keywords,
    build_top_entities,
    build_top_topics,
    calc_risk_score,
)


def build_stats(posts: Sequence[Post], baseline_posts: Iterable[Post] = ()) -> WindowStats:
    """Aggregate a post batch.

    Args:
        posts: Posts of one scope in one window
        baseline_posts: Same scope in the previous window; only used to
            decide which authors are new

    Returns:
        WindowStats; zero-valued for an empty batch
    """
    total = len(posts)
    if not total:
        return WindowStats()

    reach = sum(post.reach for post in posts)
    engagement = sum(post.engagement for post in posts)
    negative = sum(1 for post in posts if post.sentiment == SENTIMENT_NEGATIVE)

    authors = author_set(posts)
    baseline_authors = author_set(baseline_posts)
    new_authors = len(authors - baseline_authors)

    return WindowStats(
        total=total,
        reach=reach,
        engagement=engagement,
        negative_share=negative / total * 100,
        engagement_rate=(engagement / reach * 100) if reach else 0.0,
        risk_score=calc_risk_score(posts),
        # Arithmetic mean here; the global baseline uses medians
        impact_score=(reach / total) * IMPACT_WEIGHT_REACH
        + (engagement / total) * IMPACT_WEIGHT_ENGAGEMENT,
        earliest_at=min(post.timestamp for post in posts),
        latest_at=max(post.timestamp for post in posts),
        top_topics=build_top_topics(posts, TOP_TOPICS_LIMIT),
        top_entities=build_top_entities(posts, TOP_ENTITIES_LIMIT),
        keywords=build_keywords(posts, KEYWORDS_LIMIT),
        unique_authors=len(authors),
        new_authors_pct=(new_authors / len(authors) * 100) if authors else 0.0,
        geo_spread=len({post.location.city for post in posts if post.location.city}),
    )


def calc_baseline_impact(posts: Sequence[Post]) -> float:
    """Median-based impact over all current posts, ignoring zero values."""
    if not posts:
        return 0.0
    median_reach = median([post.reach for post in posts if post.reach > 0])
    median_engagement = median([post.engagement for post in posts if post.engagement > 0])
    return median_reach * IMPACT_WEIGHT_REACH + median_engagement * IMPACT_WEIGHT_ENGAGEMENT


def build_daily_counts(posts: Iterable[Post]) -> list[int]:
    """Posts per UTC calendar day, in first-seen day order."""
    return list(Counter(day_key(post.timestamp) for post in posts).values())


def resolve_min_volume(base_min: int, baseline_daily: Sequence[int], current_total: int) -> int:
    """Volume floor that scales with batch size and the scope's daily cadence."""
    daily_median = median(baseline_daily)
    from_total = round_half_up(current_total * MIN_VOLUME_TOTAL_FACTOR)
    from_median = round_half_up(daily_median * MIN_VOLUME_MEDIAN_FACTOR) if daily_median else 0
    return max(base_min, from_total, from_median, MIN_VOLUME_FLOOR)


__all__ = [
    "build_stats",
    "calc_baseline_impact",
    "build_daily_counts",
    "resolve_min_volume",
]
