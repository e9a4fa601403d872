"""Post windowing and post filters for the report layer."""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from internal.model import Post
from internal.alert_report.constant import ALL_FILTER, TIMEFRAME_HOURS
from internal.alert_report.type import Query, Window
from utils.time_utils import ensure_utc


def _matches(expected: Optional[str], actual: str) -> bool:
    return not expected or expected == ALL_FILTER or actual == expected


def search_haystack(post: Post) -> str:
    parts = (
        post.content,
        post.author,
        post.handle,
        post.location.city or "",
        post.topic,
        post.cluster,
        post.subcluster,
        post.microcluster,
    )
    return " ".join(parts).lower()


def filter_posts(posts: Sequence[Post], query: Query) -> list[Post]:
    """Apply sentiment/platform/cluster/subcluster filters and free-text search."""
    needle = (query.search or "").lower()
    return [
        post
        for post in posts
        if _matches(query.sentiment, post.sentiment)
        and _matches(query.platform, post.platform)
        and _matches(query.cluster, post.cluster)
        and _matches(query.subcluster, post.subcluster)
        and (not needle or needle in search_haystack(post))
    ]


def _in_range(post: Post, start: datetime, end: datetime) -> bool:
    return start <= post.timestamp <= end


def build_window(posts: Sequence[Post], query: Query, now: datetime) -> Window:
    """Split posts into current, previous and pre-previous windows.

    The current window is the explicit date range when one is given
    (date_to extends to the end of its day), otherwise the last
    `timeframe` hours before the newest post, otherwise the whole batch.
    The earlier windows have the same length and share their boundaries
    (range checks are inclusive on both ends).
    """
    if not posts:
        now = ensure_utc(now)
        return Window([], [], [], now, now, now, now, now, now)

    min_ts = min(post.timestamp for post in posts)
    max_ts = max(post.timestamp for post in posts)
    start, end = min_ts, max_ts

    if query.date_from or query.date_to:
        start = ensure_utc(query.date_from) if query.date_from else min_ts
        end = (
            ensure_utc(query.date_to).replace(hour=23, minute=59, second=59, microsecond=999000)
            if query.date_to
            else max_ts
        )
    else:
        hours = TIMEFRAME_HOURS.get(query.timeframe or "", 0)
        if hours:
            end = max_ts
            start = end - timedelta(hours=hours)

    window = max(timedelta(milliseconds=1), end - start)
    prev_start, prev_end = start - window, start
    baseline_start, baseline_end = prev_start - window, prev_start

    return Window(
        current_posts=[post for post in posts if _in_range(post, start, end)],
        prev_posts=[post for post in posts if _in_range(post, prev_start, prev_end)],
        prev_prev_posts=[
            post for post in posts if _in_range(post, baseline_start, baseline_end)
        ],
        start=start,
        end=end,
        prev_start=prev_start,
        prev_end=prev_end,
        baseline_start=baseline_start,
        baseline_end=baseline_end,
    )


__all__ = ["filter_posts", "search_haystack", "build_window"]
