from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from internal.model import NamedCount, KeywordCount


@dataclass(frozen=True)
class WindowStats:
    """Snapshot of one scope over one window. Recomputed on every call."""

    total: int = 0
    reach: int = 0
    engagement: int = 0
    negative_share: float = 0.0
    engagement_rate: float = 0.0
    risk_score: float = 0.0
    impact_score: float = 0.0
    earliest_at: Optional[datetime] = None
    latest_at: Optional[datetime] = None
    top_topics: list[NamedCount] = field(default_factory=list)
    top_entities: list[NamedCount] = field(default_factory=list)
    keywords: list[KeywordCount] = field(default_factory=list)
    unique_authors: int = 0
    new_authors_pct: float = 0.0
    geo_spread: int = 0

    @property
    def topic_names(self) -> list[str]:
        return [topic.name for topic in self.top_topics]


__all__ = ["WindowStats"]
