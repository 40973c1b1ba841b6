import datetime
import hashlib
import re
import zlib

import pytest

from fhashkit.engine import (
    FileOpenError,
    HashJob,
    ResultState,
    UIBridge,
    hash_files,
    open_for_read,
)


class RecordingBridge(UIBridge):
    def __init__(self, prog_max=40):
        self.events = []
        self.prog = []
        self.prog_whole = []
        self.prog_max = prog_max
        self.uppercase_seen = None

    def preparing_calc(self):
        self.events.append("preparing_calc")

    def remove_preparing_calc(self):
        self.events.append("remove_preparing_calc")

    def calc_stop(self):
        self.events.append("calc_stop")

    def calc_finish(self):
        self.events.append("calc_finish")

    def show_file_name(self, result):
        self.events.append(("show_file_name", result.state))

    def show_file_meta(self, result):
        self.events.append(("show_file_meta", result.state))

    def show_file_hash(self, result, uppercase):
        self.uppercase_seen = uppercase
        self.events.append(("show_file_hash", result.state))

    def show_file_err(self, result):
        self.events.append(("show_file_err", result.state))

    def get_prog_max(self):
        return self.prog_max

    def update_prog(self, value):
        self.prog.append(value)

    def update_prog_whole(self, value):
        self.prog_whole.append(value)

    def file_calc_finish(self):
        self.events.append("file_calc_finish")

    def file_finish(self):
        self.events.append("file_finish")


def _job(bridge, paths, **kwargs):
    kwargs.setdefault("pause", 0)
    return HashJob(bridge=bridge, paths=paths, **kwargs)


def test_hashes_of_abc(tmp_path):
    target = tmp_path / "abc.txt"
    target.write_bytes(b"abc")
    results = hash_files(_job(RecordingBridge(), [target]))
    assert len(results) == 1
    result = results[0]
    assert result.state is ResultState.ALL
    assert result.sha1 == "A9993E364706816ABA3E25717850C26C9CD0D89D"
    assert result.md5 == hashlib.md5(b"abc").hexdigest().upper()
    assert result.sha256 == hashlib.sha256(b"abc").hexdigest().upper()
    assert result.crc32 == f"{zlib.crc32(b'abc'):08X}"
    assert result.size == 3


def test_default_bridge_hashes_empty_file(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")
    results = hash_files(_job(UIBridge(), [target]))
    assert results[0].md5 == hashlib.md5(b"").hexdigest().upper()
    assert results[0].sha256 == hashlib.sha256(b"").hexdigest().upper()
    assert results[0].size == 0


def test_missing_file_reports_error(tmp_path):
    bridge = RecordingBridge()
    job = _job(bridge, [tmp_path / "nope"])
    results = hash_files(job)
    assert results[0].state is ResultState.ERROR
    assert results[0].error == "File is missing."
    assert ("show_file_err", ResultState.ERROR) in bridge.events
    assert bridge.events[-2:] == ["file_finish", "calc_finish"]


def test_directory_reports_error(tmp_path):
    results = hash_files(_job(RecordingBridge(), [tmp_path]))
    assert results[0].error == "Cannot open a directory."


def test_open_for_read_raises(tmp_path):
    with pytest.raises(FileOpenError) as info:
        open_for_read(tmp_path / "missing")
    assert str(info.value) == "File is missing."
    with pytest.raises(OSError):
        open_for_read(tmp_path)


def test_open_for_read_returns_contents(tmp_path):
    target = tmp_path / "data"
    target.write_bytes(b"payload")
    with open_for_read(target) as handle:
        assert handle.read() == b"payload"


def test_event_order_for_one_file(tmp_path):
    target = tmp_path / "f"
    target.write_bytes(b"x" * 5)
    bridge = RecordingBridge()
    job = _job(bridge, [target])
    hash_files(job)
    assert bridge.events == [
        "preparing_calc",
        "remove_preparing_calc",
        ("show_file_name", ResultState.PATH),
        ("show_file_meta", ResultState.META),
        "file_calc_finish",
        ("show_file_hash", ResultState.ALL),
        "file_finish",
        "calc_finish",
    ]
    assert job.thread_working is False


def test_uppercase_flag_passed_through(tmp_path):
    target = tmp_path / "f"
    target.write_bytes(b"abc")
    bridge = RecordingBridge()
    hash_files(_job(bridge, [target], uppercase=True))
    assert bridge.uppercase_seen is True


def test_total_size_is_sum(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"1" * 7)
    second.write_bytes(b"2" * 11)
    job = _job(RecordingBridge(), [first, second, tmp_path / "missing"])
    results = hash_files(job)
    assert job.total_size == 18
    assert [r.size for r in results[:2]] == [7, 11]
    assert [r.state for r in results] == [
        ResultState.ALL,
        ResultState.ALL,
        ResultState.ERROR,
    ]


def test_progress_rises_to_max(tmp_path):
    target = tmp_path / "f"
    payload = bytes(range(100))
    target.write_bytes(payload)
    bridge = RecordingBridge(prog_max=40)
    results = hash_files(_job(bridge, [target], chunk_size=10))
    assert bridge.prog[0] == 0
    assert all(a < b for a, b in zip(bridge.prog[1:], bridge.prog[2:]))
    assert bridge.prog[-1] == 40
    assert bridge.prog_whole[-1] == 40
    assert results[0].md5 == hashlib.md5(payload).hexdigest().upper()


def test_whole_progress_over_two_files(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"a" * 30)
    second.write_bytes(b"b" * 30)
    bridge = RecordingBridge(prog_max=40)
    hash_files(_job(bridge, [first, second], chunk_size=8))
    assert bridge.prog_whole == sorted(set(bridge.prog_whole))
    assert bridge.prog_whole[-1] == 40


def test_stop_before_start(tmp_path):
    target = tmp_path / "f"
    target.write_bytes(b"abc")
    bridge = RecordingBridge()
    job = _job(bridge, [target])
    job.stop.set()
    results = hash_files(job)
    assert results == []
    assert bridge.events == ["preparing_calc", "calc_stop"]
    assert job.thread_working is False


class StoppingBridge(RecordingBridge):
    job = None

    def show_file_meta(self, result):
        super().show_file_meta(result)
        self.job.stop.set()


def test_stop_during_read(tmp_path):
    target = tmp_path / "f"
    target.write_bytes(b"abc")
    bridge = StoppingBridge()
    job = _job(bridge, [target, target])
    bridge.job = job
    results = hash_files(job)
    assert len(results) == 1
    assert results[0].state is ResultState.META
    assert results[0].md5 == ""
    assert bridge.events[-1] == "calc_stop"
    assert "file_finish" not in bridge.events


def test_modified_date_format(tmp_path):
    target = tmp_path / "f"
    target.write_bytes(b"abc")
    stamp = 1_000_000_000
    import os

    os.utime(target, (stamp, stamp))
    results = hash_files(_job(RecordingBridge(), [target]))
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}", results[0].mdate)
    expected = datetime.datetime.fromtimestamp(stamp).strftime("%Y-%m-%d %H:%M")
    assert results[0].mdate == expected


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        HashJob(bridge=UIBridge(), paths=[], chunk_size=0)


def test_no_files_finishes(tmp_path):
    bridge = RecordingBridge()
    job = _job(bridge, [])
    assert hash_files(job) == []
    assert bridge.events == ["preparing_calc", "remove_preparing_calc", "calc_finish"]
    assert job.total_size == 0