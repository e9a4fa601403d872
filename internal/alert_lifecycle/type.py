from dataclasses import dataclass, field
from typing import Mapping

from internal.model import Alert, Severity
from .constant import DEFAULT_SLA_HOURS


@dataclass(frozen=True)
class Config:
    """Lifecycle simulator configuration.

    Attributes:
        enabled: When False alerts are left open (no simulation)
        seed: Optional prefix mixed into the per-alert hash
        sla_hours: SLA target in hours per severity
    """

    enabled: bool = True
    seed: str = ""
    sla_hours: Mapping[Severity, float] = field(
        default_factory=lambda: dict(DEFAULT_SLA_HOURS)
    )

    def __post_init__(self):
        missing = [s.value for s in Severity if s not in self.sla_hours]
        if missing:
            raise ValueError(f"sla_hours missing severities: {missing}")
        for severity, hours in self.sla_hours.items():
            if hours <= 0:
                raise ValueError(f"sla_hours[{severity.value}] must be > 0")


@dataclass(frozen=True)
class LifecycleEntry:
    """Per-alert simulation inputs."""

    alert: Alert
    age_hours: float
    hash: int
    breached: bool


__all__ = ["Config", "LifecycleEntry"]
