"""Time and size formatting helpers."""

from __future__ import annotations

import time

_SIZE_K = 1024


def current_millis() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def short_size_str(size: int, conv_1k_smaller: bool = False) -> str:
    """Render ``size`` bytes as KB/MB/GB with two decimals.

    Sizes of at most 1 KB give an empty string unless ``conv_1k_smaller`` is set,
    in which case they are shown in bytes.
    """
    if size > _SIZE_K:
        value = size / _SIZE_K
        for unit in ("KB", "MB"):
            if value <= _SIZE_K:
                return f"{value:.2f} {unit}"
            value /= _SIZE_K
        return f"{value:.2f} GB"
    if conv_1k_smaller:
        return f"{float(size):.2f} B"
    return ""