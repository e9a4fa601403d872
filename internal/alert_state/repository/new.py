"""Factory function for creating the alert state repository."""

from typing import Optional

from pkg.logger.logger import Logger
from .interface import IAlertStateRepository
from .memory import New as NewMemory


def New(logger: Optional[Logger] = None) -> IAlertStateRepository:
    """Create the default alert state repository (in-memory).

    Args:
        logger: Logger instance (optional)

    Returns:
        IAlertStateRepository implementation
    """
    return NewMemory(logger)


__all__ = ["New"]
