"""MD5 message digest computed in pure Python."""

from __future__ import annotations

import math
import struct

_MASK = 0xFFFFFFFF
_LENGTH_MASK = 0xFFFFFFFFFFFFFFFF
_BLOCK = 64

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_CONSTANTS = tuple(int(abs(math.sin(i + 1)) * 2**32) & _MASK for i in range(64))


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return memoryview(data).tobytes()


def _rotate_left(value: int, amount: int) -> int:
    return ((value << amount) | (value >> (32 - amount))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i in range(64):
        stage = i // 16
        if stage == 0:
            mixed = (b & c) | (~b & d)
            index = i
        elif stage == 1:
            mixed = (b & d) | (c & ~d)
            index = (5 * i + 1) % 16
        elif stage == 2:
            mixed = b ^ c ^ d
            index = (3 * i + 5) % 16
        else:
            mixed = c ^ (b | ~d)
            index = (7 * i) % 16
        mixed &= _MASK
        rotated = _rotate_left((a + mixed + _CONSTANTS[i] + words[index]) & _MASK, _SHIFTS[i])
        a, d, c, b = d, c, b, (b + rotated) & _MASK
    return tuple((old + new) & _MASK for old, new in zip(state, (a, b, c, d)))


class Md5:
    """Incremental MD5 hasher."""

    def __init__(self, data=b"") -> None:
        self._state = _INITIAL_STATE
        self._pending = bytearray()
        self._length = 0
        if data:
            self.update(data)

    def update(self, data) -> None:
        """Feed more bytes (or text, encoded as UTF-8) into the hash."""
        chunk = _as_bytes(data)
        self._length += len(chunk)
        self._pending += chunk
        full = len(self._pending) - len(self._pending) % _BLOCK
        state = self._state
        for offset in range(0, full, _BLOCK):
            state = _compress(state, bytes(self._pending[offset : offset + _BLOCK]))
        self._state = state
        del self._pending[:full]

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & _LENGTH_MASK
        padding = b"\x80" + b"\x00" * ((55 - len(self._pending)) % _BLOCK)
        tail = bytes(self._pending) + padding + struct.pack("<Q", bit_length)
        state = self._state
        for offset in range(0, len(tail), _BLOCK):
            state = _compress(state, tail[offset : offset + _BLOCK])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def md5(data) -> bytes:
    """Return the MD5 digest of ``data``."""
    return Md5(data).digest()