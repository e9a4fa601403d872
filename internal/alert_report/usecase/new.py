from typing import Optional

from pkg.logger.logger import Logger
from internal.alert_engine import IAlertEngine
from internal.alert_state import IAlertStateUseCase
from ..type import Config
from .usecase import AlertReport


def New(
    config: Config,
    engine: IAlertEngine,
    state: Optional[IAlertStateUseCase] = None,
    logger: Optional[Logger] = None,
) -> AlertReport:
    """Create new AlertReport instance.

    Args:
        config: Report configuration
        engine: Alert engine used for both window comparisons
        state: Persisted-state overlay (optional)
        logger: Logger instance (optional, for logging)

    Returns:
        AlertReport instance

    Raises:
        ValueError: If an argument has the wrong type
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")
    if not isinstance(engine, IAlertEngine):
        raise ValueError("engine must implement IAlertEngine")
    if state is not None and not isinstance(state, IAlertStateUseCase):
        raise ValueError("state must implement IAlertStateUseCase")

    return AlertReport(config, engine, state, logger)


__all__ = ["New"]
