"""Post record consumed by the alert engine.

Posts reach the engine already filtered and windowed by the post store.
`Post.parse()` accepts both the camelCase wire shape produced by the feed
API and snake_case dicts, and normalizes numeric noise instead of failing.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from utils.number_utils import safe_count, safe_number
from utils.time_utils import parse_timestamp, to_iso
from .constant import SENTIMENTS, SENTIMENT_NEUTRAL


class ErrInvalidPost(Exception):
    pass


@dataclass(frozen=True)
class Location:
    city: Optional[str] = None
    lat: float = 0.0
    lng: float = 0.0


@dataclass(frozen=True)
class Post:
    id: str
    timestamp: datetime
    author: str = ""
    handle: str = ""
    platform: str = ""
    content: str = ""
    sentiment: str = SENTIMENT_NEUTRAL
    topic: str = ""
    reach: int = 0
    engagement: int = 0
    media_type: str = ""
    cluster: str = ""
    subcluster: str = ""
    microcluster: str = ""
    location: Location = field(default_factory=Location)

    @property
    def author_key(self) -> str:
        """Handle, falling back to author name; as given (not normalized)."""
        return self.handle or self.author or ""

    @classmethod
    def parse(cls, raw: dict[str, Any]) -> "Post":
        if not isinstance(raw, dict):
            raise ErrInvalidPost(f"post must be a dict, got {type(raw).__name__}")

        post_id = raw.get("id")
        if post_id is None or str(post_id) == "":
            raise ErrInvalidPost("post.id is required")

        timestamp = parse_timestamp(raw.get("timestamp"))
        if timestamp is None:
            raise ErrInvalidPost(f"post {post_id}: invalid timestamp")

        sentiment = str(raw.get("sentiment") or SENTIMENT_NEUTRAL).strip().lower()
        if sentiment not in SENTIMENTS:
            sentiment = SENTIMENT_NEUTRAL

        location_raw = raw.get("location") or {}
        location = Location(
            city=location_raw.get("city") or raw.get("city") or None,
            lat=safe_number(location_raw.get("lat", raw.get("lat"))),
            lng=safe_number(location_raw.get("lng", raw.get("lng"))),
        )

        return cls(
            id=str(post_id),
            timestamp=timestamp,
            author=_text(raw.get("author")),
            handle=_text(raw.get("handle")),
            platform=_text(raw.get("platform")),
            content=_text(raw.get("content")),
            sentiment=sentiment,
            topic=_text(raw.get("topic")),
            reach=safe_count(raw.get("reach")),
            engagement=safe_count(raw.get("engagement")),
            media_type=_text(raw.get("mediaType", raw.get("media_type"))),
            cluster=_text(raw.get("cluster")),
            subcluster=_text(raw.get("subcluster")),
            microcluster=_text(raw.get("microcluster")),
            location=location,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "handle": self.handle,
            "platform": self.platform,
            "content": self.content,
            "sentiment": self.sentiment,
            "topic": self.topic,
            "timestamp": to_iso(self.timestamp),
            "reach": self.reach,
            "engagement": self.engagement,
            "media_type": self.media_type,
            "cluster": self.cluster,
            "subcluster": self.subcluster,
            "microcluster": self.microcluster,
            "location": {
                "city": self.location.city,
                "lat": self.location.lat,
                "lng": self.location.lng,
            },
        }


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


__all__ = ["Post", "Location", "ErrInvalidPost"]
