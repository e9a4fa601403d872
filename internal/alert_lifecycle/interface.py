from datetime import datetime
from typing import Protocol, Sequence, runtime_checkable

from internal.model import Alert


@runtime_checkable
class ILifecycleSimulator(Protocol):
    """Assigns workflow status and timestamps to ranked alerts.

    Implementations receive alerts in rank order and must return them in
    the same order.
    """

    def simulate(self, alerts: Sequence[Alert], now: datetime) -> list[Alert]:
        ...


__all__ = ["ILifecycleSimulator"]
