import pytest

from helpers import at_utc
from remote_viewer.scheduling.timeofday import (
    InvalidTimeFormat,
    crosses_midnight,
    format_time_of_day,
    parse_time_of_day,
    second_of_day,
    slot_window_seconds,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("00:00", 0),
        ("8:05", 8 * 3600 + 5 * 60),
        ("23:59:59", 86399),
        ("10:30:15", 10 * 3600 + 30 * 60 + 15),
    ],
)
def test_parse_time_of_day(text, expected):
    assert parse_time_of_day(text) == expected


@pytest.mark.parametrize("text", ["", None, "24:00", "12:60", "12:00:60", "noon", "1200"])
def test_parse_time_of_day_rejects(text):
    with pytest.raises(InvalidTimeFormat):
        parse_time_of_day(text)


def test_invalid_time_is_a_value_error():
    with pytest.raises(ValueError):
        parse_time_of_day("25:00")


def test_slot_window_same_day():
    assert slot_window_seconds(parse_time_of_day("10:00"), parse_time_of_day("10:30")) == 1800


def test_slot_window_crossing_midnight():
    assert slot_window_seconds(parse_time_of_day("23:00"), parse_time_of_day("01:00")) == 7200
    assert crosses_midnight(parse_time_of_day("23:00"), parse_time_of_day("01:00"))
    assert not crosses_midnight(parse_time_of_day("08:00"), parse_time_of_day("09:00"))


def test_second_of_day_is_utc():
    assert second_of_day(at_utc(0, 0)) == 0
    assert second_of_day(at_utc(8, 15)) == 8 * 3600 + 15 * 60
    assert second_of_day(at_utc(23, 59, 59) + 999) == 86399


def test_format_time_of_day():
    assert format_time_of_day(0) == "00:00:00"
    assert format_time_of_day(86399) == "23:59:59"
    assert format_time_of_day(86400 + 61) == "00:01:01"
