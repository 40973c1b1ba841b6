"""MD5 message digest with optional seeded initial constants."""

from __future__ import annotations

import math
import struct

_MASK = 0xFFFFFFFF
_LENGTH_MASK = (1 << 64) - 1

_K = tuple(int(abs(math.sin(i + 1)) * 2**32) & _MASK for i in range(64))
_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)
_INIT = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)
_SEED_FACTORS = (11, 71, 37, 97)


def _rotl(value: int, bits: int) -> int:
    value &= _MASK
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for step in range(64):
        if step < 16:
            mixed = (b & c) | (~b & _MASK & d)
            index = step
        elif step < 32:
            mixed = (b & d) | (c & ~d & _MASK)
            index = (5 * step + 1) % 16
        elif step < 48:
            mixed = b ^ c ^ d
            index = (3 * step + 5) % 16
        else:
            mixed = c ^ (b | (~d & _MASK))
            index = (7 * step) % 16
        rotated = _rotl(a + mixed + _K[step] + words[index], _SHIFTS[step])
        a, d, c, b = d, c, b, (b + rotated) & _MASK
    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d)))


class MD5:
    """Incremental MD5; a non-zero ``seed`` shifts the initial constants."""

    block_size = 64
    digest_size = 16

    def __init__(self, data=b"", seed=0):
        seed &= _MASK
        self._state = tuple(
            (value + seed * factor) & _MASK
            for value, factor in zip(_INIT, _SEED_FACTORS)
        )
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data) -> None:
        """Feed more bytes into the digest."""
        chunk = memoryview(data).tobytes()
        self._length = (self._length + len(chunk)) & _LENGTH_MASK
        pending = self._buffer + chunk
        whole = len(pending) - len(pending) % self.block_size
        state = self._state
        for start in range(0, whole, self.block_size):
            state = _compress(state, pending[start:start + self.block_size])
        self._state = state
        self._buffer = pending[whole:]

    def digest(self) -> bytes:
        """Return the 16-byte digest; the object may keep being updated."""
        tail = self._buffer + b"\x80" + b"\x00" * ((55 - len(self._buffer)) % 64)
        tail += struct.pack("<Q", (self._length * 8) & _LENGTH_MASK)
        state = self._state
        for start in range(0, len(tail), self.block_size):
            state = _compress(state, tail[start:start + self.block_size])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as upper-case hex."""
        return self.digest().hex().upper()