"""Alert State Domain.

Overlays human-edited workflow state (status, ownership, priority) on top
of freshly evaluated alerts and records operator actions.
"""

from .constant import *
from .interface import IAlertStateUseCase
from .type import AlertStateRecord, AlertAction, ActionResult
from .errors import ErrInvalidTransition, ErrUnknownAction, ErrStateMergeFailed
from .usecase import (
    New,
    AlertStateUseCase,
    overlay_record,
    normalize_lifecycle,
    resolve_target,
    check_transition,
)

__all__ = [
    "IAlertStateUseCase",
    "AlertStateRecord",
    "AlertAction",
    "ActionResult",
    "ErrInvalidTransition",
    "ErrUnknownAction",
    "ErrStateMergeFailed",
    "New",
    "AlertStateUseCase",
    "overlay_record",
    "normalize_lifecycle",
    "resolve_target",
    "check_transition",
    "ACTION_TARGETS",
    "DEFAULT_ACTION",
]
