"""SHA-256 message digest."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_LENGTH_MASK = (1 << 64) - 1

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INIT = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _rotr(value: int, bits: int) -> int:
    return ((value >> bits) | (value << (32 - bits))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    w = list(struct.unpack(">16I", block))
    for t in range(16, 64):
        x, y = w[t - 15], w[t - 2]
        s0 = _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)
        s1 = _rotr(y, 17) ^ _rotr(y, 19) ^ (y >> 10)
        w.append((w[t - 16] + s0 + w[t - 7] + s1) & _MASK)
    a, b, c, d, e, f, g, h = state
    for k, word in zip(_K, w):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        choice = g ^ (e & (f ^ g))
        t1 = (h + big_s1 + choice + k + word) & _MASK
        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        majority = (a & b) ^ (c & (a ^ b))
        t2 = (big_s0 + majority) & _MASK
        a, b, c, d, e, f, g, h = (t1 + t2) & _MASK, a, b, c, (d + t1) & _MASK, e, f, g
    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e, f, g, h)))


class SHA256:
    """Incremental SHA-256."""

    block_size = 64
    digest_size = 32

    def __init__(self, data=b""):
        self._state = _INIT
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
        """Return the 32-byte digest; the object may keep being updated."""
        tail = self._buffer + b"\x80" + b"\x00" * ((55 - len(self._buffer)) % 64)
        tail += struct.pack(">Q", (self._length * 8) & _LENGTH_MASK)
        state = self._state
        for start in range(0, len(tail), self.block_size):
            state = _compress(state, tail[start:start + self.block_size])
        return struct.pack(">8I", *state)

    def hexdigest(self) -> str:
        """Return the digest as upper-case hex."""
        return self.digest().hex().upper()