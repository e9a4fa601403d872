from datetime import datetime
from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable

from internal.model import Alert, Post


@runtime_checkable
class IAlertEngine(Protocol):
    """Protocol for alert evaluation."""

    def evaluate(
        self,
        current_posts: Sequence[Post],
        prev_posts: Sequence[Post],
        threshold_overrides: Optional[Mapping[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> list[Alert]:
        """Compare two windows of posts and return ranked alerts."""
        ...


__all__ = ["IAlertEngine"]
