"""In-memory alert state repository.

Backs the overlay in tests and in the evaluate command; records live for
the lifetime of the process.
"""

import threading
from typing import Optional

from pkg.logger.logger import Logger
from ...type import AlertAction, AlertStateRecord
from ..errors import ErrInvalidData
from ..interface import IAlertStateRepository
from ..option import (
    GetManyOptions,
    UpsertOptions,
    AppendActionOptions,
    ListActionsOptions,
)


class AlertStateMemoryRepository(IAlertStateRepository):
    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger
        self._records: dict[str, AlertStateRecord] = {}
        self._actions: list[AlertAction] = []
        self._lock = threading.Lock()

    def detail(self, alert_id: str) -> Optional[AlertStateRecord]:
        with self._lock:
            return self._records.get(alert_id)

    def get_many(self, opt: GetManyOptions) -> dict[str, AlertStateRecord]:
        with self._lock:
            return {
                alert_id: self._records[alert_id]
                for alert_id in opt.alert_ids
                if alert_id in self._records
            }

    def upsert(self, opt: UpsertOptions) -> AlertStateRecord:
        if opt.record is None or not opt.record.alert_id:
            raise ErrInvalidData("upsert requires a record with an alert_id")
        with self._lock:
            self._records[opt.record.alert_id] = opt.record
        if self.logger:
            self.logger.debug(
                "internal.alert_state.repository.memory.upsert: Record stored",
                extra={"alert_id": opt.record.alert_id},
            )
        return opt.record

    def append_action(self, opt: AppendActionOptions) -> AlertAction:
        if opt.action is None:
            raise ErrInvalidData("append_action requires an action")
        with self._lock:
            self._actions.append(opt.action)
        return opt.action

    def list_actions(self, opt: ListActionsOptions) -> list[AlertAction]:
        with self._lock:
            matching = [action for action in self._actions if action.alert_id == opt.alert_id]
        return matching[-opt.limit:] if opt.limit > 0 else matching


__all__ = ["AlertStateMemoryRepository"]
