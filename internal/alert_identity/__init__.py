"""Alert identity and evidence."""

from .constant import *
from .usecase import (
    fnv1a_32,
    to_base36,
    hash_string,
    build_stable_id,
    build_instance_id,
    utf16_units,
    evidence_score,
    build_evidence,
)

__all__ = [
    "fnv1a_32",
    "to_base36",
    "hash_string",
    "build_stable_id",
    "build_instance_id",
    "utf16_units",
    "evidence_score",
    "build_evidence",
]
