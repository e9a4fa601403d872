from datetime import datetime
from typing import Optional, Protocol, Sequence, runtime_checkable

from internal.model import Post
from .type import AlertDetail, DashboardSnapshot, Query


@runtime_checkable
class IAlertReport(Protocol):
    """Protocol for the alert dashboard and detail views."""

    def dashboard(
        self,
        posts: Sequence[Post],
        query: Optional[Query] = None,
        now: Optional[datetime] = None,
    ) -> DashboardSnapshot:
        ...

    def detail(
        self,
        alert_id: str,
        posts: Sequence[Post],
        query: Optional[Query] = None,
        now: Optional[datetime] = None,
    ) -> AlertDetail:
        ...


__all__ = ["IAlertReport"]
