"""Repository interface for alert_state domain.

Method naming: Verb + Entity (Detail, GetMany, Upsert, AppendAction, ListActions).
"""

from typing import Optional, Protocol, runtime_checkable

from ..type import AlertAction, AlertStateRecord
from .option import (
    GetManyOptions,
    UpsertOptions,
    AppendActionOptions,
    ListActionsOptions,
)


@runtime_checkable
class IAlertStateRepository(Protocol):
    """Protocol for alert state repository.

    Rules:
    - Options pattern for all operations.
    - Not found → return None / omit from the mapping (not raise error).
    - Storage failures raise RepositoryError subclasses.
    """

    def detail(self, alert_id: str) -> Optional[AlertStateRecord]:
        """Get the record of one alert, or None."""
        ...

    def get_many(self, opt: GetManyOptions) -> dict[str, AlertStateRecord]:
        """Get records keyed by alert id; missing ids are omitted."""
        ...

    def upsert(self, opt: UpsertOptions) -> AlertStateRecord:
        """Insert or replace the record of one alert."""
        ...

    def append_action(self, opt: AppendActionOptions) -> AlertAction:
        """Append one entry to the action log."""
        ...

    def list_actions(self, opt: ListActionsOptions) -> list[AlertAction]:
        """Action log of one alert, oldest first."""
        ...


__all__ = ["IAlertStateRepository"]
