"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Union

ByteLike = Union[bytes, bytearray, memoryview, str]


def clamp_offset(pos: int, length: int) -> int:
    if pos < 0:
        return 0
    if pos > length:
        return length
    return pos


def is_valid_range(start: int, end: int, length: int) -> bool:
    return 0 <= start < end <= length


def coerce_bytes(value: ByteLike) -> bytes:
    """Normalise edit payloads; ``str`` is encoded as UTF-8 and kept as bytes."""

    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def coerce_byte(value: Union[int, ByteLike]) -> int:
    if isinstance(value, int):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        return value
    payload = coerce_bytes(value)
    if len(payload) != 1:
        raise ValueError(f"expected a single byte, got {len(payload)}")
    return payload[0]


__all__ = ["ByteLike", "clamp_offset", "is_valid_range", "coerce_bytes", "coerce_byte"]
