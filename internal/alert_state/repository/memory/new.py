"""Factory for the in-memory alert state repository."""

from typing import Optional

from pkg.logger.logger import Logger
from .repository import AlertStateMemoryRepository


def New(logger: Optional[Logger] = None) -> AlertStateMemoryRepository:
    """Create a new in-memory alert state repository.

    Args:
        logger: Logger instance (optional)

    Returns:
        AlertStateMemoryRepository instance
    """
    return AlertStateMemoryRepository(logger=logger)


__all__ = ["New"]
