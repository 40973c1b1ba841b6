import time

import pytest

from fhashkit.utils import current_millis, short_size_str


def test_current_millis_tracks_wall_clock():
    before = time.time() * 1000
    now = current_millis()
    after = time.time() * 1000
    assert before - 1 <= now <= after + 1


def test_current_millis_does_not_go_backwards():
    first = current_millis()
    second = current_millis()
    assert second >= first


def test_small_sizes_empty_by_default():
    assert short_size_str(0) == ""
    assert short_size_str(1024) == ""


def test_small_sizes_in_bytes_when_asked():
    assert short_size_str(1024, True) == "1024.00 B"
    assert short_size_str(7, True).endswith(" B")
    assert float(short_size_str(7, True).split()[0]) == 7


@pytest.mark.parametrize(
    "size, unit, expected",
    [
        (1025, "KB", 1025 / 1024),
        (3 * 1024 * 1024, "MB", 3),
        (5 * 1024 ** 3, "GB", 5),
        (2048 * 1024 ** 3, "GB", 2048),
    ],
)
def test_units_and_values(size, unit, expected):
    text = short_size_str(size)
    number, suffix = text.split(" ")
    assert suffix == unit
    assert float(number) == pytest.approx(expected, abs=0.005)


def test_boundary_stays_in_lower_unit():
    assert short_size_str(1024 * 1024).endswith(" KB")
    assert short_size_str(1024 * 1024 + 1).endswith(" MB")


def test_two_decimals_always():
    for size in (2000, 10 ** 7, 10 ** 11):
        number = short_size_str(size).split(" ")[0]
        assert len(number.split(".")[1]) == 2