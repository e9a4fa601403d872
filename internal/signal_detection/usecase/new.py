from typing import Optional

from pkg.logger.logger import Logger
from .signal_detection import SignalDetection


def New(logger: Optional[Logger] = None) -> SignalDetection:
    """Create new SignalDetection instance.

    Args:
        logger: Logger instance (optional, for logging)

    Returns:
        SignalDetection instance
    """
    return SignalDetection(logger)


__all__ = ["New"]
