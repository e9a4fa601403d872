from typing import Optional

from pkg.logger.logger import Logger
from internal.alert_engine.type import Config
from internal.alert_lifecycle import ILifecycleSimulator, New as NewLifecycle
from internal.signal_detection import ISignalDetection, New as NewSignalDetection
from .usecase import AlertEngine


def New(
    config: Optional[Config] = None,
    logger: Optional[Logger] = None,
    *,
    signal_detection: Optional[ISignalDetection] = None,
    lifecycle: Optional[ILifecycleSimulator] = None,
) -> AlertEngine:
    """Create new AlertEngine instance.

    Args:
        config: Engine configuration (defaults when None)
        logger: Logger instance (optional, for logging)
        signal_detection: Detector (defaults to the standard rule set)
        lifecycle: Lifecycle simulator (defaults to the hash simulator)

    Returns:
        AlertEngine instance

    Raises:
        ValueError: If an argument has the wrong type
    """
    config = config or Config()
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")
    if signal_detection is None:
        signal_detection = NewSignalDetection(logger)
    elif not isinstance(signal_detection, ISignalDetection):
        raise ValueError("signal_detection must implement ISignalDetection")
    if lifecycle is None:
        lifecycle = NewLifecycle(logger=logger)
    elif not isinstance(lifecycle, ILifecycleSimulator):
        raise ValueError("lifecycle must implement ILifecycleSimulator")

    return AlertEngine(config, signal_detection, lifecycle, logger)


__all__ = ["New"]
