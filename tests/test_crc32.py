import zlib

import pytest

from fhashkit.crc32 import CRC32, crc32


def test_check_value():
    assert CRC32(b"123456789").hexdigest() == "CBF43926"


def test_empty_input():
    assert CRC32().hexdigest() == "00000000"
    assert crc32(b"") == 0


@pytest.mark.parametrize(
    "data",
    [b"a", b"abc", b"hello world", bytes(range(256)), b"\xff" * 1000],
)
def test_matches_zlib(data):
    assert crc32(data) == zlib.crc32(data)


def test_incremental_equals_one_shot():
    data = bytes(range(256)) * 5
    checksum = CRC32()
    for start in range(0, len(data), 77):
        checksum.update(data[start:start + 77])
    assert checksum.value() == crc32(data)


def test_value_does_not_change_state():
    checksum = CRC32(b"abc")
    first = checksum.value()
    assert checksum.value() == first
    checksum.update(b"def")
    assert checksum.value() == crc32(b"abcdef")


def test_hexdigest_format():
    checksum = CRC32(b"some data")
    text = checksum.hexdigest()
    assert len(text) == 8
    assert text == text.upper()
    assert int(text, 16) == checksum.value()


def test_accepts_bytearray_and_memoryview():
    assert crc32(bytearray(b"xyz")) == crc32(memoryview(b"xyz")) == zlib.crc32(b"xyz")


def test_rejects_text():
    with pytest.raises(TypeError):
        crc32("text")