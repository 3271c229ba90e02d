"""Tests for time grid generation."""

import logging
from datetime import date, datetime, timezone

import pytest

from chronogrid import (
    ClockWindow,
    Duration,
    InvalidDurationError,
    explode_time_range,
    to_millis,
)
from chronogrid.util import DAY, HOUR


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def ms(*args: int) -> int:
    return to_millis(utc(*args))


def test_daily_grid_includes_both_bounds():
    points = explode_time_range(utc(2020, 1, 1), utc(2020, 1, 4), "P1D")
    assert points == [ms(2020, 1, 1), ms(2020, 1, 2), ms(2020, 1, 3), ms(2020, 1, 4)]


def test_end_appended_when_step_overshoots():
    """The last step passes end; end is still the final point, exactly once."""
    points = explode_time_range(utc(2020, 1, 1), utc(2020, 1, 1, 10), "PT4H")
    assert points == [
        ms(2020, 1, 1, 0),
        ms(2020, 1, 1, 4),
        ms(2020, 1, 1, 8),
        ms(2020, 1, 1, 10),
    ]


@pytest.mark.parametrize("period", ["PT1H", "PT7H", "P1D", "P3D", "P1W", "P1M"])
def test_grid_always_ends_with_end(period):
    start, end = utc(2020, 1, 1), utc(2020, 3, 1, 5)
    points = explode_time_range(start, end, period)
    assert points[0] == to_millis(start)
    assert points[-1] == to_millis(end)
    assert all(a < b for a, b in zip(points, points[1:]))


def test_equal_bounds_yield_only_end():
    assert explode_time_range(utc(2020, 1, 1), utc(2020, 1, 1), "P1D") == [ms(2020, 1, 1)]


def test_start_after_end_yields_only_end():
    assert explode_time_range(utc(2020, 1, 5), utc(2020, 1, 1), "P1D") == [ms(2020, 1, 1)]


def test_monthly_steps_keep_clamped_day():
    """Jan 31 + P1M clamps to Feb 29, and later steps continue from the 29th."""
    points = explode_time_range(utc(2020, 1, 31), utc(2020, 4, 1), "P1M")
    assert points == [ms(2020, 1, 31), ms(2020, 2, 29), ms(2020, 3, 29), ms(2020, 4, 1)]


def test_hourly_grid_with_business_window():
    """A 09:00/17:00 window keeps hours 9 through 17, then the end bound."""
    start, end = utc(2020, 1, 1), utc(2020, 1, 2)
    points = explode_time_range(start, end, "PT1H", "09:00/17:00")

    kept = points[:-1]
    assert [(p - to_millis(start)) // HOUR for p in kept] == list(range(9, 18))
    assert points[-1] == to_millis(end)


def test_window_minutes_are_inclusive():
    points = explode_time_range(
        utc(2020, 1, 1, 9), utc(2020, 1, 1, 11), "PT15M", "09:30/10:15"
    )
    assert points == [
        ms(2020, 1, 1, 9, 30),
        ms(2020, 1, 1, 9, 45),
        ms(2020, 1, 1, 10, 0),
        ms(2020, 1, 1, 10, 15),
        ms(2020, 1, 1, 11, 0),
    ]


def test_window_uses_utc_time_of_day():
    window = ClockWindow.parse("09:00/10:00")
    assert window.contains(utc(2020, 1, 1, 9, 59))
    assert not window.contains(utc(2020, 1, 1, 10, 1))
    assert not window.contains(utc(2020, 1, 1, 8, 59))


def test_window_object_accepted():
    window = ClockWindow(min_hour=0, min_minute=0, max_hour=0, max_minute=0)
    points = explode_time_range(utc(2020, 1, 1), utc(2020, 1, 3), "PT12H", window)
    assert points == [ms(2020, 1, 1), ms(2020, 1, 2), ms(2020, 1, 3)]


def test_window_str_round_trip():
    assert str(ClockWindow.parse("9:05/17:30")) == "09:05/17:30"


@pytest.mark.parametrize("text", ["9/17", "09:00", "09:00/17:00/18:00", "aa:bb/cc:dd"])
def test_window_rejects_malformed_text(text):
    with pytest.raises(ValueError, match="Invalid clock window"):
        ClockWindow.parse(text)


def test_window_rejects_out_of_range_values():
    with pytest.raises(ValueError, match="min_hour must be 0-23"):
        ClockWindow.parse("25:00/26:00")
    with pytest.raises(ValueError, match="max_minute must be 0-59"):
        ClockWindow.parse("09:00/10:60")


@pytest.mark.parametrize("period", ["PT0S", Duration(), [0, 0, 0]])
def test_zero_period_is_rejected(period):
    """A zero step would never reach end."""
    with pytest.raises(InvalidDurationError, match="non-zero"):
        explode_time_range(utc(2020, 1, 1), utc(2020, 1, 2), period)


def test_negative_period_is_rejected():
    with pytest.raises(InvalidDurationError, match="does not advance"):
        explode_time_range(utc(2020, 1, 1), utc(2020, 1, 2), Duration(days=-1))


def test_int_bounds_are_epoch_millis():
    start = ms(2020, 1, 1)
    points = explode_time_range(start, start + 2 * DAY, "PT12H")
    assert points == [start + i * 12 * HOUR for i in range(5)]


def test_date_bounds_cover_whole_days():
    points = explode_time_range(date(2020, 1, 1), date(2020, 1, 1), "PT6H")
    assert points[:4] == [ms(2020, 1, 1, h) for h in (0, 6, 12, 18)]
    assert points[-1] == ms(2020, 1, 1, 23, 59, 59) + 999


def test_bounds_are_not_modified():
    start, end = utc(2020, 1, 1), utc(2020, 1, 2)
    explode_time_range(start, end, "PT1H")
    assert start == utc(2020, 1, 1)
    assert end == utc(2020, 1, 2)


def test_rejects_naive_bound():
    with pytest.raises(TypeError, match="timezone-aware"):
        explode_time_range(datetime(2020, 1, 1), utc(2020, 1, 2), "P1D")


def test_rejects_unsupported_bound():
    with pytest.raises(TypeError, match="must be int, datetime, or date"):
        explode_time_range("2020-01-01", utc(2020, 1, 2), "P1D")


def test_logs_grid_size(caplog):
    caplog.set_level(logging.DEBUG, logger="chronogrid.grid")
    explode_time_range(utc(2020, 1, 1), utc(2020, 1, 1, 0, 3), "PT1M")
    assert "4 points" in caplog.text
