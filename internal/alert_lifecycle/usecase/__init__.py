from .new import New
from .lifecycle import HashLifecycleSimulator, StaticLifecycleSimulator
from .helpers import deterministic_hash, build_entry, pick_initial_status, apply_status

__all__ = [
    "New",
    "HashLifecycleSimulator",
    "StaticLifecycleSimulator",
    "deterministic_hash",
    "build_entry",
    "pick_initial_status",
    "apply_status",
]
