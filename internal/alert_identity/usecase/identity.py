"""Stable and instance identifiers.

stable_id tracks a scope across evaluations; instance_id changes when a
different signal dominates or the latest post falls on a new UTC day.
Hashes run over UTF-16 code units so ids match those minted by the
dashboard client for the same scope.
"""

from datetime import datetime
from typing import Iterator

from internal.model import Scope, SignalType
from internal.alert_identity.constant import (
    STABLE_ID_PREFIX,
    INSTANCE_ID_PREFIX,
    FNV_OFFSET_BASIS,
    FNV_PRIME,
    UINT32_MASK,
    BASE36_ALPHABET,
)
from utils.time_utils import day_key


def utf16_units(value: str) -> Iterator[int]:
    for char in value:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            yield 0xD800 + (code >> 10)
            yield 0xDC00 + (code & 0x3FF)
        else:
            yield code


def fnv1a_32(value: str) -> int:
    hash_value = FNV_OFFSET_BASIS
    for unit in utf16_units(value):
        hash_value ^= unit
        hash_value = (hash_value * FNV_PRIME) & UINT32_MASK
    return hash_value


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def hash_string(value: str) -> str:
    return to_base36(fnv1a_32(value))


def build_stable_id(scope: Scope) -> str:
    return STABLE_ID_PREFIX + hash_string(scope.identity_key)


def build_instance_id(scope: Scope, primary: SignalType, latest_at: datetime) -> str:
    bucket = day_key(latest_at)
    return INSTANCE_ID_PREFIX + hash_string(f"{scope.identity_key}:{primary.value}:{bucket}")


__all__ = [
    "fnv1a_32",
    "to_base36",
    "hash_string",
    "build_stable_id",
    "build_instance_id",
    "utf16_units",
]
