"""Hash a list of files with MD5, SHA-1, SHA-256 and CRC-32, reporting progress."""

from __future__ import annotations

import os
import stat
import threading
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import BinaryIO

from .crc32 import CRC32
from .md5 import MD5
from .sha1 import SHA1, ReportType
from .sha256 import SHA256

MAX_FILES_NUM = 8192

_PRESIZE_LIMIT = 200
_DEFAULT_CHUNK = 1 << 20
_DEFAULT_PAUSE = 0.05
_DEFAULT_PROG_MAX = 100
_DATE_FORMAT = "%Y-%m-%d %H:%M"


class ResultState(IntEnum):
    """How far the work on one file has come."""

    NONE = 0
    PATH = 1
    META = 2
    ALL = 3
    ERROR = 4


@dataclass
class ResultData:
    """What is known about one file: its metadata, its hashes or its error."""

    path: str = ""
    state: ResultState = ResultState.NONE
    size: int = 0
    mdate: str = ""
    version: str = ""
    md5: str = ""
    sha1: str = ""
    sha256: str = ""
    crc32: str = ""
    error: str = ""


class UIBridge:
    """Receives progress and results from :func:`hash_files`.

    The base class keeps track of the job's overall state (preparing,
    stopped, finished, whole progress) and guards shared data with a lock;
    subclasses override what they show.
    """

    preparing: bool = False
    stopped: bool = False
    finished: bool = False
    whole_progress: int = 0

    def _data_lock(self) -> threading.Lock:
        lock = self.__dict__.get("_bridge_lock")
        if lock is None:
            lock = threading.Lock()
            self.__dict__["_bridge_lock"] = lock
        return lock

    def lock_data(self) -> None:
        """Take exclusive access to shared display data."""
        self._data_lock().acquire()

    def unlock_data(self) -> None:
        """Release access taken by :meth:`lock_data`."""
        self._data_lock().release()

    def preparing_calc(self) -> None:
        """Called before file sizes are gathered."""
        self.preparing = True

    def remove_preparing_calc(self) -> None:
        """Called once file sizes are gathered."""
        self.preparing = False

    def calc_stop(self) -> None:
        """Called when the job was stopped before it finished."""
        self.stopped = True

    def calc_finish(self) -> None:
        """Called when every file has been handled."""
        self.finished = True

    def show_file_name(self, result: ResultData) -> None:
        """Called when work on a file starts."""

    def show_file_meta(self, result: ResultData) -> None:
        """Called when a file's size and modification date are known."""

    def show_file_hash(self, result: ResultData, uppercase: bool) -> None:
        """Called when a file's hashes are known."""

    def show_file_err(self, result: ResultData) -> None:
        """Called when a file could not be opened."""

    def get_prog_max(self) -> int:
        """Return the value that a full progress bar stands for."""
        return _DEFAULT_PROG_MAX

    def update_prog(self, value: int) -> None:
        """Move the progress bar of the current file."""

    def update_prog_whole(self, value: int) -> None:
        """Move the progress bar of the whole job."""
        self.whole_progress = value

    def file_calc_finish(self) -> None:
        """Called when all data of the current file has been read."""

    def file_finish(self) -> None:
        """Called when the current file is done, whether hashed or failed."""


class FileOpenError(OSError):
    """A file could not be opened for hashing."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


@dataclass
class HashJob:
    """The files to hash, the bridge to report to, and the job's shared state."""

    bridge: UIBridge
    paths: list[str]
    uppercase: bool = False
    stop: threading.Event = field(default_factory=threading.Event)
    thread_working: bool = False
    total_size: int = 0
    results: list[ResultData] = field(default_factory=list)
    chunk_size: int = _DEFAULT_CHUNK
    pause: float = _DEFAULT_PAUSE

    def __post_init__(self) -> None:
        self.paths = [os.fspath(path) for path in self.paths]
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")


def open_for_read(path) -> BinaryIO:
    """Open a regular file for binary reading, raising :class:`FileOpenError`."""
    path = os.fspath(path)
    try:
        mode = os.stat(path).st_mode
    except OSError:
        raise FileOpenError("File is missing.", path) from None
    if stat.S_ISREG(mode):
        try:
            return open(path, "rb")
        except OSError:
            raise FileOpenError("Cannot open this file.", path) from None
    if stat.S_ISDIR(mode):
        raise FileOpenError("Cannot open a directory.", path)
    raise FileOpenError("File is missing.", path)


def _size_of(path: str) -> int:
    try:
        with open_for_read(path) as handle:
            return os.fstat(handle.fileno()).st_size
    except OSError:
        return 0


def _halt(job: HashJob) -> list[ResultData]:
    job.thread_working = False
    job.bridge.calc_stop()
    return job.results


def hash_files(job: HashJob) -> list[ResultData]:
    """Hash every file of ``job``, reporting to its bridge; return the results.

    The job may be stopped from another thread by setting ``job.stop``.
    """
    bridge = job.bridge
    job.thread_working = True
    job.total_size = 0
    count = len(job.paths)
    sizes = [0] * count
    sizes_known = count < _PRESIZE_LIMIT
    finished_whole = 0
    position_whole = 0

    bridge.preparing_calc()
    if sizes_known:
        for index, path in enumerate(job.paths):
            if job.stop.is_set():
                return _halt(job)
            sizes[index] = _size_of(path)
            job.total_size += sizes[index]
    bridge.remove_preparing_calc()

    for index, path in enumerate(job.paths):
        if job.stop.is_set():
            return _halt(job)
        if job.pause > 0:
            time.sleep(job.pause)

        result = ResultData(path=path, state=ResultState.PATH)
        job.results.append(result)
        bridge.show_file_name(result)

        try:
            handle = open_for_read(path)
        except FileOpenError as exc:
            result.error = str(exc)
            result.state = ResultState.ERROR
            bridge.show_file_err(result)
            bridge.file_finish()
            continue

        with handle:
            md5, sha1, sha256, crc = MD5(), SHA1(), SHA256(), CRC32()
            hashers = (md5, sha1, sha256, crc)
            bridge.update_prog(0)

            info = os.fstat(handle.fileno())
            result.mdate = time.strftime(_DATE_FORMAT, time.localtime(info.st_mtime))
            size = info.st_size
            result.size = size
            if sizes_known:
                job.total_size += size - sizes[index]
                sizes[index] = size
            else:
                job.total_size += size

            result.state = ResultState.META
            bridge.show_file_meta(result)

            position = 0
            finished = 0
            while True:
                if job.stop.is_set():
                    return _halt(job)
                data = handle.read(job.chunk_size)
                for hasher in hashers:
                    hasher.update(data)
                finished += len(data)
                finished_whole += len(data)

                prog_max = bridge.get_prog_max()
                new_position = prog_max if size == 0 else prog_max * finished // size
                if new_position > position:
                    bridge.update_prog(new_position)
                    position = new_position

                if job.total_size == 0:
                    new_whole = prog_max
                else:
                    new_whole = prog_max * finished_whole // job.total_size
                if sizes_known and new_whole > position_whole:
                    position_whole = new_whole
                    bridge.update_prog_whole(position_whole)

                if len(data) < job.chunk_size:
                    break

        bridge.file_calc_finish()
        if not sizes_known:
            bridge.update_prog_whole((index + 1) * 100 // count)

        result.md5 = md5.hexdigest()
        result.sha1 = sha1.report(ReportType.HEX)
        result.sha256 = sha256.hexdigest()
        result.crc32 = crc.hexdigest()
        result.state = ResultState.ALL
        bridge.show_file_hash(result, job.uppercase)
        bridge.file_finish()

    bridge.calc_finish()
    job.thread_working = False
    return job.results