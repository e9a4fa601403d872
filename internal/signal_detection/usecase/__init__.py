from .new import New
from .signal_detection import SignalDetection, detect_signals
from .helpers import content_key, coordination_ratio, topic_novelty_pct

__all__ = [
    "New",
    "SignalDetection",
    "detect_signals",
    "content_key",
    "coordination_ratio",
    "topic_novelty_pct",
]
