from typing import Sequence

from internal.model import Post
from internal.alert_identity.constant import (
    EVIDENCE_LIMIT,
    EVIDENCE_WEIGHT_REACH,
    EVIDENCE_WEIGHT_ENGAGEMENT,
    EVIDENCE_SENTIMENT_BOOST,
)


def evidence_score(post: Post) -> float:
    boost = EVIDENCE_SENTIMENT_BOOST.get(post.sentiment, 1.0)
    return (post.reach * EVIDENCE_WEIGHT_REACH + post.engagement * EVIDENCE_WEIGHT_ENGAGEMENT) * boost


def build_evidence(posts: Sequence[Post], limit: int = EVIDENCE_LIMIT) -> list[Post]:
    """Highest-scoring posts, at most one per handle/author."""
    ranked = sorted(posts, key=lambda post: -evidence_score(post))

    picked: list[Post] = []
    seen_authors: set[str] = set()
    for post in ranked:
        author = post.author_key.lower()
        if author:
            if author in seen_authors:
                continue
            seen_authors.add(author)
        picked.append(post)
        if len(picked) >= limit:
            break
    return picked


__all__ = ["evidence_score", "build_evidence"]
