"""Tests for WallClock, a time of day without a date."""

from datetime import date, datetime, timezone

import pytest

from reltime import DAY, Duration, WallClock
from reltime.errors import InvalidArgument, InvalidMeridiem, TimeOutOfBounds

EVENING = WallClock(5, 30, 27, "pm")


def test_construct_twelve_hour():
    assert EVENING.hour == 17
    assert EVENING.minute == 30
    assert EVENING.second == 27
    assert EVENING.meridiem == "pm"
    assert WallClock(5, 30, 27, "AM").hour == 5
    assert WallClock(5, 30, 27, "Pm") == EVENING


def test_construct_twenty_four_hour():
    assert WallClock(17, 30, 27) == EVENING
    assert WallClock(9).to_string() == "9:00:00 AM"
    assert WallClock().in_seconds() == 0


def test_midnight_and_noon():
    """Test that 12 AM is midnight and 12 PM is noon."""
    assert WallClock(12, meridiem="am") == WallClock(0)
    assert WallClock(12, meridiem="pm") == WallClock(12)
    assert WallClock(0).to_string() == "12:00:00 AM"
    assert WallClock(12).to_string() == "12:00:00 PM"
    assert WallClock(0, meridiem="am") == WallClock(0)


@pytest.mark.parametrize(
    "args",
    [
        (24,),
        (-1,),
        (10, 60),
        (10, 0, 60),
        (10, -1),
        (13, 0, 0, "pm"),
    ],
)
def test_out_of_bounds(args):
    with pytest.raises(TimeOutOfBounds):
        WallClock(*args)


def test_invalid_meridiem():
    with pytest.raises(InvalidMeridiem, match="'xm'"):
        WallClock(5, meridiem="xm")

    with pytest.raises(ValueError):
        WallClock(5, meridiem="noon")


def test_from_seconds():
    assert WallClock.from_seconds(63_027) == EVENING
    assert WallClock.from_seconds(DAY - 1).to_string("twenty_four_hour") == "23:59:59"

    with pytest.raises(TimeOutOfBounds, match="within one day"):
        WallClock.from_seconds(DAY)

    with pytest.raises(TimeOutOfBounds):
        WallClock.from_seconds(-1)


def test_from_units():
    half_past_one = WallClock.from_units({"hour": 1, "second": 30 * 60})
    assert half_past_one == WallClock(1, 30)
    assert half_past_one.in_minutes() == 90


@pytest.mark.parametrize(
    "text,expected",
    [
        ("9:00 PM", WallClock(21, 0)),
        ("13:00", WallClock(13)),
        ("23:34:45", WallClock(23, 34, 45)),
        ("11:00:01 pm", WallClock(23, 0, 1)),
        ("12:15am", WallClock(0, 15)),
        ("  7:05  ", WallClock(7, 5)),
    ],
)
def test_from_string(text, expected):
    assert WallClock.from_string(text) == expected


def test_from_string_errors():
    with pytest.raises(InvalidArgument, match="Cannot parse"):
        WallClock.from_string("seven o'clock")

    with pytest.raises(InvalidArgument, match="Cannot parse"):
        WallClock.from_string("7")

    with pytest.raises(TimeOutOfBounds):
        WallClock.from_string("13:00 PM")

    with pytest.raises(TimeOutOfBounds):
        WallClock.from_string("24:00")

    with pytest.raises(InvalidMeridiem):
        WallClock.from_string("9:00 XM")


def test_hour_in():
    assert EVENING.hour_in("twelve_hour") == 5
    assert EVENING.hour_in("twenty_four_hour") == 17
    assert EVENING.hour_in() == 17
    assert WallClock(0).hour_in("twelve_hour") == 12
    assert WallClock(12).hour_in("twelve_hour") == 12

    with pytest.raises(InvalidArgument, match="twelve_hour"):
        EVENING.hour_in("military")  # type: ignore[arg-type]


def test_to_string():
    assert EVENING.to_string() == "5:30:27 PM"
    assert str(EVENING) == "5:30:27 PM"
    assert repr(EVENING) == "WallClock(5:30:27 PM)"
    assert EVENING.to_string(use_seconds=False) == "5:30 PM"
    assert EVENING.to_string(include_meridiem=False) == "5:30:27"
    assert EVENING.to_string("twenty_four_hour") == "17:30:27"
    assert EVENING.to_string("twenty_four_hour", use_seconds=False) == "17:30"
    assert WallClock.from_string("21:05").to_string(
        "twenty_four_hour", use_seconds=False
    ) == "21:05"
    assert WallClock(7, 5, 9).to_string("twenty_four_hour") == "7:05:09"


def test_conversions():
    assert EVENING.in_seconds() == 17 * 3600 + 30 * 60 + 27
    assert int(EVENING) == EVENING.in_seconds()
    assert EVENING.in_minutes() == 17 * 60 + 30
    assert EVENING.in_hours() == 17
    assert EVENING.to_duration() == Duration(hours=17, minutes=30, seconds=27)


def test_duration_to_wall():
    assert Duration(hours=17, minutes=30, seconds=27).to_wall() == EVENING

    with pytest.raises(TimeOutOfBounds, match="months"):
        Duration(months=1).to_wall()

    with pytest.raises(TimeOutOfBounds):
        Duration(hours=25).to_wall()

    with pytest.raises(TimeOutOfBounds):
        Duration(seconds=-1).to_wall()


def test_on():
    assert EVENING.on(date(2000, 1, 1)) == datetime(2000, 1, 1, 17, 30, 27)

    moment = datetime(2000, 1, 1, 3, 45, tzinfo=timezone.utc)
    placed = EVENING.on(moment)
    assert placed == datetime(2000, 1, 1, 17, 30, 27, tzinfo=timezone.utc)
    assert placed.tzinfo is timezone.utc


def test_ordering_and_hashing():
    times = [WallClock(23), WallClock(0), EVENING, WallClock(12)]
    assert sorted(times) == [WallClock(0), WallClock(12), EVENING, WallClock(23)]
    assert WallClock(1) > WallClock(0)
    assert len({WallClock(0), WallClock(12, meridiem="am"), EVENING}) == 2
    assert WallClock(0) != 0


def test_full_comparisons():
    assert WallClock(9) <= WallClock(9)
    assert WallClock(9) <= WallClock(10)
    assert WallClock(10) >= WallClock(9)
    assert WallClock(0, 0, 1) > WallClock(0)
    assert not WallClock(9) > WallClock(9)
    assert not WallClock(8) >= EVENING

    with pytest.raises(TypeError):
        WallClock(9) <= 9  # type: ignore[operator]
