"""64-bit FNV-1a hash."""

from __future__ import annotations

FNV1A_PRIME = 0x00000100000001B3
FNV1A_OFFSET = 0xCBF29CE484222325
_MASK = 0xFFFFFFFFFFFFFFFF


def fnv1a(data) -> int:
    """Return the 64-bit FNV-1a hash of ``data`` (bytes, or text as UTF-8)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    value = FNV1A_OFFSET
    for byte in memoryview(data).tobytes():
        value = ((value ^ byte) * FNV1A_PRIME) & _MASK
    return value