"""Alert lifecycle domain.

Derives workflow status and lifecycle timestamps for freshly ranked alerts.
"""

from .constant import *
from .interface import ILifecycleSimulator
from .type import Config, LifecycleEntry
from .usecase import (
    New,
    HashLifecycleSimulator,
    StaticLifecycleSimulator,
    deterministic_hash,
    build_entry,
    pick_initial_status,
    apply_status,
)

__all__ = [
    "ILifecycleSimulator",
    "Config",
    "LifecycleEntry",
    "New",
    "HashLifecycleSimulator",
    "StaticLifecycleSimulator",
    "deterministic_hash",
    "build_entry",
    "pick_initial_status",
    "apply_status",
    "DEFAULT_SLA_HOURS",
]
