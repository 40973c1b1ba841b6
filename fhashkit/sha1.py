"""SHA-1 message digest with file hashing and report formatting."""

from __future__ import annotations

import os
import struct
from enum import IntEnum
from functools import partial

_MASK = 0xFFFFFFFF
_LENGTH_MASK = (1 << 64) - 1
_INIT = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_READ_CHUNK = 8000


class ReportType(IntEnum):
    """How :meth:`SHA1.report` renders the digest."""

    HEX = 0
    DIGIT = 1


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    w = list(struct.unpack(">16I", block))
    for t in range(16, 80):
        w.append(_rotl(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1))
    a, b, c, d, e = state
    for t, word in enumerate(w):
        if t < 20:
            f = ((b & (c ^ d)) ^ d, 0x5A827999)
        elif t < 40:
            f = (b ^ c ^ d, 0x6ED9EBA1)
        elif t < 60:
            f = (((b | c) & d) | (b & c), 0x8F1BBCDC)
        else:
            f = (b ^ c ^ d, 0xCA62C1D6)
        mixed, k = f
        temp = (_rotl(a, 5) + mixed + e + k + word) & _MASK
        a, b, c, d, e = temp, a, _rotl(b, 30), c, d
    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e)))


class SHA1:
    """Incremental SHA-1."""

    block_size = 64
    digest_size = 20

    def __init__(self, data=b""):
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> None:
        """Return to the initial state, discarding all input."""
        self._state = _INIT
        self._buffer = b""
        self._length = 0

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

    def hash_file(self, path: str | os.PathLike) -> None:
        """Feed the whole contents of the file at ``path``; raises OSError."""
        with open(path, "rb") as handle:
            for chunk in iter(partial(handle.read, _READ_CHUNK), b""):
                self.update(chunk)

    def digest(self) -> bytes:
        """Return the 20-byte digest; the object may keep being updated."""
        tail = self._buffer + b"\x80" + b"\x00" * ((55 - len(self._buffer)) % 64)
        tail += struct.pack(">Q", (self._length * 8) & _LENGTH_MASK)
        state = self._state
        for start in range(0, len(tail), self.block_size):
            state = _compress(state, tail[start:start + self.block_size])
        return struct.pack(">5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as upper-case hex."""
        return self.digest().hex().upper()

    def report(self, report_type=ReportType.HEX) -> str:
        """Render the digest as upper-case hex or as concatenated byte values."""
        kind = ReportType(report_type)
        if kind is ReportType.HEX:
            return self.hexdigest()
        return "".join(str(byte) for byte in self.digest())