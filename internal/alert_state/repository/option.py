"""Options structs for alert_state repository operations.

Convention: UseCase passes Options → Repository resolves them.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..type import AlertAction, AlertStateRecord


@dataclass
class GetManyOptions:
    """Options for loading the records of several alerts at once."""

    alert_ids: list[str] = field(default_factory=list)


@dataclass
class UpsertOptions:
    """Options for inserting or replacing one record."""

    record: Optional[AlertStateRecord] = None


@dataclass
class AppendActionOptions:
    """Options for appending to the action log."""

    action: Optional[AlertAction] = None


@dataclass
class ListActionsOptions:
    """Options for reading the action log of one alert."""

    alert_id: str = ""
    limit: int = 100


__all__ = [
    "GetManyOptions",
    "UpsertOptions",
    "AppendActionOptions",
    "ListActionsOptions",
]
