"""Factory function for creating alert state use case."""

from typing import Optional

from pkg.logger.logger import Logger
from ..repository.interface import IAlertStateRepository
from ..repository.new import New as NewRepository
from .usecase import AlertStateUseCase


def New(
    repository: Optional[IAlertStateRepository] = None,
    logger: Optional[Logger] = None,
) -> AlertStateUseCase:
    """Create a new alert state use case instance.

    Args:
        repository: Repository for data access (in-memory when None)
        logger: Logger instance (optional)

    Returns:
        AlertStateUseCase instance

    Raises:
        ValueError: If repository does not implement IAlertStateRepository
    """
    if repository is None:
        repository = NewRepository(logger)
    elif not isinstance(repository, IAlertStateRepository):
        raise ValueError("repository must implement IAlertStateRepository")

    return AlertStateUseCase(repository=repository, logger=logger)


__all__ = ["New"]
