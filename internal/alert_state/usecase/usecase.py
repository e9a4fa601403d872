"""Use case for the persisted alert state overlay."""

from datetime import datetime
from typing import Optional, Sequence

from pkg.logger.logger import Logger
from internal.model import Alert, AlertStatus
from ..constant import DEFAULT_ACTION, DEFAULT_ACTOR, DEFAULT_SNOOZE_HOURS
from ..errors import ErrStateMergeFailed
from ..interface import IAlertStateUseCase
from ..type import ActionResult, AlertAction
from ..repository.interface import IAlertStateRepository
from ..repository.option import AppendActionOptions, GetManyOptions, UpsertOptions
from utils.time_utils import ensure_utc, utc_now
from .helpers import build_transition, check_transition, overlay_record, resolve_target


class AlertStateUseCase(IAlertStateUseCase):
    """Overlays human-edited state and records workflow actions."""

    def __init__(
        self,
        repository: IAlertStateRepository,
        logger: Optional[Logger] = None,
    ):
        """Initialize use case.

        Args:
            repository: Repository for state records and the action log
            logger: Logger instance (optional)
        """
        self.repository = repository
        self.logger = logger

    def merge(self, alerts: Sequence[Alert], strict: bool = False) -> list[Alert]:
        """Overlay persisted state onto engine alerts.

        Any repository failure leaves the engine values untouched and is
        logged as a warning, unless strict is set.

        Raises:
            ErrStateMergeFailed: repository failure with strict=True
        """
        if not alerts:
            return list(alerts)

        try:
            records = self.repository.get_many(
                GetManyOptions(alert_ids=[alert.id for alert in alerts])
            )
        except Exception as exc:
            if strict:
                raise ErrStateMergeFailed(str(exc)) from exc
            if self.logger:
                self.logger.warning(
                    "internal.alert_state.usecase.merge: Alert state merge failed",
                    extra={"alerts": len(alerts), "error": str(exc)},
                )
            return list(alerts)

        merged = [
            overlay_record(alert, records[alert.id]) if alert.id in records else alert
            for alert in alerts
        ]
        if self.logger and records:
            self.logger.debug(
                "internal.alert_state.usecase.merge: Persisted state applied",
                extra={"alerts": len(alerts), "records": len(records)},
            )
        return merged

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
        """Apply a workflow action and persist the resulting state.

        Args:
            alert_id: Public alert id ("overall" or "{type}:{id}")
            action: Action name, defaults to "ack"
            actor: Who performed the action
            note: Free-text note stored in the action log
            now: Action clock (defaults to the current UTC time)
            snooze_hours: Snooze length for the snooze action
            current_status: Engine status when nothing is persisted yet

        Returns:
            ActionResult with the stored record and log entry

        Raises:
            ValueError: empty alert_id or non-positive snooze_hours
            ErrUnknownAction: unrecognized action name
            ErrInvalidTransition: action not allowed from the current status
        """
        if not alert_id:
            raise ValueError("alert_id is required")
        hours = DEFAULT_SNOOZE_HOURS if snooze_hours is None else float(snooze_hours)
        if hours <= 0:
            raise ValueError("snooze_hours must be > 0")

        action_name = (action or DEFAULT_ACTION).strip().lower()
        target = resolve_target(action_name)
        now = ensure_utc(now) if now else utc_now()

        existing = self.repository.detail(alert_id)
        current = (existing.status if existing else None) or current_status or AlertStatus.OPEN
        check_transition(current, target)

        record = self.repository.upsert(
            UpsertOptions(record=build_transition(alert_id, existing, target, now, hours))
        )
        entry = self.repository.append_action(
            AppendActionOptions(
                action=AlertAction(
                    alert_id=alert_id,
                    action=action_name,
                    actor=actor or DEFAULT_ACTOR,
                    created_at=now,
                    from_status=current,
                    to_status=target,
                    note=note,
                )
            )
        )

        if self.logger:
            self.logger.info(
                "internal.alert_state.usecase.apply_action: Action applied",
                extra={
                    "alert_id": alert_id,
                    "action": action_name,
                    "from_status": current.value,
                    "to_status": target.value,
                },
            )
        return ActionResult(record=record, action=entry)


__all__ = ["AlertStateUseCase"]
