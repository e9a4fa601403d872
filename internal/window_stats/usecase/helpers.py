import re
from collections import Counter
from typing import Iterable, Sequence

from internal.model import (
    Post,
    NamedCount,
    KeywordCount,
    SENTIMENT_NEGATIVE,
    SENTIMENT_NEUTRAL,
    SENTIMENT_POSITIVE,
)
from internal.window_stats.constant import (
    KEYWORD_MIN_LENGTH,
    KEYWORD_STOPWORDS,
    RISK_WEIGHT_NEGATIVE,
    RISK_WEIGHT_NEUTRAL,
    RISK_WEIGHT_POSITIVE,
)
from utils.number_utils import clamp

_NON_KEYWORD_CHARS = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_author(post: Post) -> str:
    return post.author_key.strip().lower()


def author_set(posts: Iterable[Post]) -> set[str]:
    return {key for key in (normalize_author(post) for post in posts) if key}


def calc_risk_score(posts: Sequence[Post]) -> float:
    reach_total = sum(post.reach for post in posts)
    if not reach_total:
        return 0.0

    buckets = {SENTIMENT_POSITIVE: 0, SENTIMENT_NEUTRAL: 0, SENTIMENT_NEGATIVE: 0}
    for post in posts:
        # Zero-reach posts still count once
        weight = post.reach if post.reach > 0 else 1
        if post.sentiment in buckets:
            buckets[post.sentiment] += weight

    raw = (
        buckets[SENTIMENT_NEGATIVE] * RISK_WEIGHT_NEGATIVE
        + buckets[SENTIMENT_NEUTRAL] * RISK_WEIGHT_NEUTRAL
        + buckets[SENTIMENT_POSITIVE] * RISK_WEIGHT_POSITIVE
    ) / reach_total
    return clamp(raw * 100, 0.0, 100.0)


def _top(counter: Counter, limit: int) -> list[tuple[str, int]]:
    # Counter preserves first-seen order, sorted() is stable
    return sorted(counter.items(), key=lambda item: -item[1])[:limit]


def build_top_topics(posts: Iterable[Post], limit: int) -> list[NamedCount]:
    counter = Counter(post.topic for post in posts if post.topic)
    return [NamedCount(name=name, count=count) for name, count in _top(counter, limit)]


def build_top_entities(posts: Iterable[Post], limit: int) -> list[NamedCount]:
    counter = Counter(
        key for key in (post.author_key.strip() for post in posts) if key
    )
    return [NamedCount(name=name, count=count) for name, count in _top(counter, limit)]


def extract_tokens(text: str) -> list[str]:
    cleaned = _NON_KEYWORD_CHARS.sub(" ", (text or "").lower())
    return [
        token
        for token in _WHITESPACE.split(cleaned)
        if len(token) >= KEYWORD_MIN_LENGTH and token not in KEYWORD_STOPWORDS
    ]


def build_keywords(posts: Iterable[Post], limit: int) -> list[KeywordCount]:
    counter: Counter = Counter()
    for post in posts:
        counter.update(extract_tokens(post.content))
    return [KeywordCount(term=term, count=count) for term, count in _top(counter, limit)]
