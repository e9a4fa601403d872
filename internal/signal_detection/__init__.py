"""Signal Detection Domain.

Nine statistical rules comparing a scope's current window to its previous
window.
"""

from .constant import *
from .interface import ISignalDetection
from .type import Thresholds, DetectionContext, DetectionResult
from .errors import ErrInvalidThreshold
from .usecase import New, SignalDetection, detect_signals

__all__ = [
    "ISignalDetection",
    "Thresholds",
    "DetectionContext",
    "DetectionResult",
    "ErrInvalidThreshold",
    "New",
    "SignalDetection",
    "detect_signals",
    "SIGNAL_LABELS",
    "THRESHOLD_ALIASES",
]
