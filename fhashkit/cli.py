"""Command-line front end: hash the files named on the command line."""

from __future__ import annotations

import math
import sys
import threading
from typing import TextIO

from .engine import HashJob, ResultData, UIBridge, hash_files
from .strhelper import to_lower, to_upper
from .utils import current_millis, short_size_str

VERSION = "2.0.0"

_PROG_MAX = 40
_UNIT = 1024


class ConsoleBridge(UIBridge):
    """Writes progress and results of a hash job as plain text."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._old_prog_pos = 0
        self._lock = threading.Lock()

    def _write(self, text: str) -> None:
        self._stream.write(text)

    def lock_data(self) -> None:
        """Take exclusive access to the console's shared state."""
        self._lock.acquire()

    def unlock_data(self) -> None:
        """Release access taken by :meth:`lock_data`."""
        self._lock.release()

    def preparing_calc(self) -> None:
        super().preparing_calc()
        self._write("Prepare to start calculation.\n\n")

    def remove_preparing_calc(self) -> None:
        """Record that preparation is over; the console shows nothing."""
        super().remove_preparing_calc()

    def calc_stop(self) -> None:
        """Record that the job stopped; the console prints nothing more."""
        super().calc_stop()

    def calc_finish(self) -> None:
        """Record that the job finished; the console prints nothing more."""
        super().calc_finish()

    def show_file_name(self, result: ResultData) -> None:
        self._write(f"{result.path}\n")

    def show_file_meta(self, result: ResultData) -> None:
        short = short_size_str(result.size)
        self._write(f"File Size: {result.size} Byte(s) ({short})\n")
        self._write(f"Modified Date: {result.mdate}\n")

    def show_file_hash(self, result: ResultData, uppercase: bool) -> None:
        convert = to_upper if uppercase else to_lower
        self._write(f"MD5: {convert(result.md5)}\n")
        self._write(f"SHA1: {convert(result.sha1)}\n")
        self._write(f"SHA256: {convert(result.sha256)}\n")
        self._write(f"CRC32: {convert(result.crc32)}\n")

    def show_file_err(self, result: ResultData) -> None:
        self._write(f"{result.error}\n")

    def get_prog_max(self) -> int:
        return _PROG_MAX

    def update_prog(self, value: int) -> None:
        """Draw one '#' for every step the progress bar advanced."""
        if value < self._old_prog_pos:
            self._old_prog_pos = 0
        steps = value - self._old_prog_pos
        if steps > 0:
            self._write("#" * steps)
            self._stream.flush()
        self._old_prog_pos = value

    def update_prog_whole(self, value: int) -> None:
        """Record overall progress; the console draws no bar for it."""
        super().update_prog_whole(value)

    def file_calc_finish(self) -> None:
        self._write("\n")

    def file_finish(self) -> None:
        self._write("\n")


def format_summary(total_size: int, duration_ms: int) -> str:
    """Render the closing line: elapsed seconds and, above 1 KB/s, the speed."""
    if duration_ms:
        speed = total_size / duration_ms * 1000
    else:
        speed = math.inf if total_size else math.nan

    measure = ""
    if speed / _UNIT > 1:
        speed /= _UNIT
        measure = "KB/s"
        if speed / _UNIT > 1:
            speed /= _UNIT
            measure = "MB/s"

    line = f"Finished in {duration_ms / 1000.0:4.2f}s"
    if measure:
        line += f", {speed:4.2f} {measure}"
    return line


def main(argv: list[str] | None = None) -> int:
    """Hash every file given in ``argv`` and print the results."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout

    out.write("fhash - A files hash calculator\n")
    out.write(f"Version: {VERSION}\n")
    out.write("\n")

    if not args:
        out.write("Usage: fhash [file1] [file2] [file3] ...\n")
        return 0

    job = HashJob(bridge=ConsoleBridge(out), paths=args, uppercase=False)

    begin = current_millis()
    hash_files(job)
    duration = current_millis() - begin

    out.write(format_summary(job.total_size, duration) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())