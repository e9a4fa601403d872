from .new import New
from .usecase import AlertStateUseCase
from .helpers import overlay_record, normalize_lifecycle, resolve_target, check_transition

__all__ = [
    "New",
    "AlertStateUseCase",
    "overlay_record",
    "normalize_lifecycle",
    "resolve_target",
    "check_transition",
]
