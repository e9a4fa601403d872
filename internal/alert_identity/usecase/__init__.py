from .identity import (
    fnv1a_32,
    to_base36,
    hash_string,
    build_stable_id,
    build_instance_id,
    utf16_units,
)
from .evidence import evidence_score, build_evidence
