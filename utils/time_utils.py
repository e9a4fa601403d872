"""Timestamp helpers.

All engine arithmetic happens in UTC. Naive datetimes are assumed to be UTC
and calendar days are computed on the UTC date, matching the day buckets
used by the upstream post store.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string, epoch milliseconds or datetime.

    Returns None when the value cannot be interpreted.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, (int, float)):
        try:
            return EPOCH + timedelta(milliseconds=float(value))
        except (OverflowError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"
        try:
            return ensure_utc(datetime.fromisoformat(text))
        except ValueError:
            return None
    return None


def to_epoch_ms(value: datetime) -> int:
    delta = ensure_utc(value) - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_epoch_ms(value: float) -> datetime:
    return EPOCH + timedelta(milliseconds=value)


def day_key(value: datetime) -> str:
    """UTC calendar day as YYYY-MM-DD."""
    return ensure_utc(value).strftime("%Y-%m-%d")


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """Render as ISO-8601 UTC with millisecond precision and a Z suffix."""
    if value is None:
        return None
    return ensure_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


__all__ = [
    "ensure_utc",
    "parse_timestamp",
    "to_epoch_ms",
    "from_epoch_ms",
    "day_key",
    "to_iso",
    "utc_now",
]
