from typing import Optional

from pkg.logger.logger import Logger
from internal.alert_lifecycle.interface import ILifecycleSimulator
from internal.alert_lifecycle.type import Config
from .lifecycle import HashLifecycleSimulator, StaticLifecycleSimulator


def New(config: Optional[Config] = None, logger: Optional[Logger] = None) -> ILifecycleSimulator:
    """Create the lifecycle simulator for a configuration.

    Args:
        config: Lifecycle configuration (defaults when None)
        logger: Logger instance (optional, for logging)

    Returns:
        HashLifecycleSimulator, or StaticLifecycleSimulator when disabled

    Raises:
        ValueError: If config has the wrong type
    """
    config = config or Config()
    if not isinstance(config, Config):
        raise ValueError("config must be an alert_lifecycle Config")
    if not config.enabled:
        return StaticLifecycleSimulator()
    return HashLifecycleSimulator(config, logger)


__all__ = ["New"]
