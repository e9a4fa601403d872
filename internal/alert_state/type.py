from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Optional

from internal.model import AlertStatus, Severity
from utils.time_utils import to_iso


@dataclass(frozen=True)
class AlertStateRecord:
    """Human-edited state of one alert.

    None means "not persisted"; the engine value is kept for that field.
    """

    alert_id: str
    status: Optional[AlertStatus] = None
    ack_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
    snooze_until: Optional[datetime] = None
    last_status_at: Optional[datetime] = None
    owner: Optional[str] = None
    team: Optional[str] = None
    assignee: Optional[str] = None
    priority: Optional[float] = None
    severity: Optional[Severity] = None


@dataclass(frozen=True)
class AlertAction:
    """One entry of the append-only action log."""

    alert_id: str
    action: str
    actor: str
    created_at: datetime
    from_status: AlertStatus
    to_status: AlertStatus
    note: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["created_at"] = to_iso(self.created_at)
        data["from_status"] = self.from_status.value
        data["to_status"] = self.to_status.value
        return data


@dataclass(frozen=True)
class ActionResult:
    record: AlertStateRecord
    action: AlertAction


__all__ = ["AlertStateRecord", "AlertAction", "ActionResult"]
