"""Interface for Alert State use case."""

from datetime import datetime
from typing import Optional, Protocol, Sequence, runtime_checkable

from internal.model import Alert, AlertStatus
from .type import ActionResult


@runtime_checkable
class IAlertStateUseCase(Protocol):
    """Protocol for the persisted-state overlay."""

    def merge(self, alerts: Sequence[Alert], strict: bool = False) -> list[Alert]:
        """Overlay persisted state onto engine alerts."""
        ...

    def apply_action(
        self,
        alert_id: str,
        action: Optional[str] = None,
        actor: Optional[str] = None,
        note: Optional[str] = None,
        now: Optional[datetime] = None,
        snooze_hours: Optional[float] = None,
        current_status: Optional[AlertStatus] = None,
    ) -> ActionResult:
        """Apply a workflow action and persist the resulting state."""
        ...


__all__ = ["IAlertStateUseCase"]
