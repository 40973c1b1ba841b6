"""Table-driven CRC-32 (reflected polynomial 0xEDB88320)."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_POLY = 0xEDB88320


def _make_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ _POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()


class CRC32:
    """Incremental CRC-32 checksum."""

    def __init__(self, data=b""):
        self._crc = _MASK
        if data:
            self.update(data)

    def update(self, data) -> None:
        """Feed more bytes into the checksum."""
        crc = self._crc
        for byte in memoryview(data).cast("B"):
            crc = (crc >> 8) ^ _TABLE[(crc ^ byte) & 0xFF]
        self._crc = crc

    def value(self) -> int:
        """Return the finished checksum as an unsigned 32-bit integer."""
        return ~self._crc & _MASK

    def hexdigest(self) -> str:
        """Return the finished checksum as eight upper-case hex digits."""
        return f"{self.value():08X}"


def crc32(data) -> int:
    """Return the CRC-32 of ``data`` in one call."""
    return CRC32(data).value()